import logging, os
from datetime import datetime

logger = logging.getLogger("pura_admin")

def init(log_dir: str | None = None, level: str = "INFO") -> None:
    if logger.handlers:
        return
    logger.setLevel(logging.DEBUG)

    ch = logging.StreamHandler()
    ch.setLevel(getattr(logging, level.upper(), logging.INFO))
    ch.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(ch)

    log_dir = os.path.expanduser(log_dir or "~/.config/pura_admin/logs")
    try:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(os.path.join(log_dir, f"pura_admin_{datetime.now():%Y%m%d}.log"))
    except OSError as e:
        logger.warning("File logging disabled (%s): %s", log_dir, e)
    else:
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        logger.addHandler(fh)

    logger.info("Pura Admin logging initialized")
