"""Core building blocks of the logging facade.

Import from the submodules (``logfacade.core.logger``,
``logfacade.core.handlers``, ...) or from the top-level package.
"""
