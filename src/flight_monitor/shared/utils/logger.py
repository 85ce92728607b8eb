import os

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = "flight-monitor"


def get_logger(service_name: str | None = None) -> Logger:
    """サービス名付きの構造化ロガーを返す

    サービス名は 引数 > POWERTOOLS_SERVICE_NAME > DEFAULT_SERVICE_NAME の順に決まる。
    ログレベルは POWERTOOLS_LOG_LEVEL で変更できる。
    """
    return Logger(
        service=service_name
        or os.environ.get("POWERTOOLS_SERVICE_NAME", DEFAULT_SERVICE_NAME)
    )
