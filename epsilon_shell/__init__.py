"""epsilon_shell package: command interpreter for the Epsilon virtual drive shell.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
