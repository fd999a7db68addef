import logging

LOG_FORMAT = "%(message)s"
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
log = logging.getLogger("DrmSmith")

def li(msg: str):
    log.info("[i] " + msg)

def lw(msg: str):
    log.warning("[!] " + msg)

def ld(msg: str):
    log.debug("[DEBUG] " + msg)

def le(msg: str):
    log.error("[x] " + msg)

def enable_verbose():
    """Raise the root logger, its handlers and the package logger to DEBUG."""
    logging.getLogger().setLevel(logging.DEBUG)
    for h in logging.getLogger().handlers:
        h.setLevel(logging.DEBUG)
    log.setLevel(logging.DEBUG)
    li("Verbose logging enabled.")

__all__ = ["li", "lw", "ld", "le", "log", "enable_verbose"]
