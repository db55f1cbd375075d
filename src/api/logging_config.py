"""
ログ設定
"""

import logging
import os
import sys
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """
    ルートロガーに標準出力ハンドラを設定する
    level を省略した場合は環境変数 HULK_LOG_LEVEL（既定 INFO）
    """
    if level is None:
        level = os.environ.get("HULK_LOG_LEVEL", "INFO").upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)
    logging.captureWarnings(True)
