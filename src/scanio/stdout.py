from _scanio.stdout import close, print, printf, println, writer  # noqa: F401
