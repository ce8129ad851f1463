"""sforg-wrap: Salesforce CLI wrappers for scratch orgs and org auth info.

Thin orchestration over the ``sf`` and ``jq`` executables with
dual-mode (human / JSON) error reporting.
"""

from sforg_wrap.version import __version__

__all__: list[str] = ["__version__"]
