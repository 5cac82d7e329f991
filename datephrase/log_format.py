def log_formatter(record: dict, *, colorize: bool = True) -> str:
    """Format log messages for the command line sink."""
    extra = record["extra"]
    if colorize:
        result = (
            "<green>{time:HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        )
        if "text" in extra:
            result += "<magenta>{extra[text]}</magenta> | "
        result += "<level>{message}</level>\n{exception}"
    else:
        result = "{time:HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | "
        if "text" in extra:
            result += "{extra[text]} | "
        result += "{message}\n{exception}"
    return result
