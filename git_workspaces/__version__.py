"""Version information for git-workspaces."""

try:
    from git_workspaces._version import __version__
except ImportError:
    # Running from a source checkout without build metadata
    __version__ = "0.0.0+unknown"
