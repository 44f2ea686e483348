"""
Remote service construction.

The Feishu client is built once in the entry point (server.py / cli.py) and
passed explicitly to the tools that need it. Nothing here caches it.
"""

from adapters.feishu import FeishuClient, LarkFeishuClient
from config import FeishuConfig, mask_api_key
from logging_config import logger

__all__ = [
    "build_feishu_client",
]


def build_feishu_client(config: FeishuConfig | None) -> FeishuClient | None:
    """
    Construct the Feishu client from credentials.

    Returns:
        A FeishuClient, or None when no credentials were supplied.
    """
    if config is None:
        logger.info("Feishu service not initialised: missing configuration")
        return None

    client = LarkFeishuClient(config.app_id, config.app_secret)
    logger.info(f"Feishu service initialised, App ID: {mask_api_key(config.app_id)}")
    return client
