import contextlib
import logging
import os
import sys
from typing import Dict

import requests


def make_logger(name: str):
    logger = logging.getLogger(name)

    # make_logger is called once per client instance, so we must not stack up handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)

        formatter = logging.Formatter("%(levelname)s %(name)s %(message)s")
        handler.setFormatter(formatter)

        logger.addHandler(handler)

    if "DEBUG" in os.environ:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    return logger


@contextlib.contextmanager
def managed_session(proxies: Dict[str, str] = None):
    """
    Set up requests session, optionally with proxies preconfigured. If no proxies are passed, the SCPSLAPI_PROXY
    environment variable is checked. It may contain any proxy URL requests understands, e.g.,
    socks5://127.0.0.1:9050.
    :param proxies: requests style proxies mapping
    :return: session with proxies preconfigured
    """

    if proxies is None:
        proxy_url = os.environ.get("SCPSLAPI_PROXY", None)

        if proxy_url:
            proxies = {
                "http": proxy_url,
                "https": proxy_url,
            }

    session = requests.session()

    # this way, we only overwrite entries we want to change, and leave existing ones alone
    if proxies:
        session.proxies.update(proxies)

    try:
        yield session

    finally:
        session.close()
