import logging


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)s:%(message)s", level=level)
    logging.getLogger("pdfbrief").setLevel(level)
