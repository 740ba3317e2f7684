"""daycell 로깅 설정.

분류 사유와 선택 규칙 매칭은 DEBUG, 유효하지 않은 날짜 같은 degrade는 WARNING으로 남는다.
"""

import logging
import sys

LOGGER_NAME = "daycell"

_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
# DEBUG에서는 어느 단계(함수)가 남긴 로그인지 함께 표시
_DEBUG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s:%(funcName)s] %(message)s"

_configured = False


def setup_logging(level: int | str = logging.INFO) -> None:
    """daycell 로거에 stderr 핸들러 하나를 붙인다.

    - stdout은 CLI 출력 전용이므로 stderr 사용
    - level은 int 또는 "DEBUG" 같은 레벨 이름
    - 여러 번 호출해도 핸들러는 하나
    """
    global _configured
    if _configured:
        return

    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")
    _configured = True

    handler = logging.StreamHandler(sys.stderr)
    fmt = _DEBUG_FORMAT if level <= logging.DEBUG else _FORMAT
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.addHandler(handler)


def reset_logging() -> None:
    """테스트용: 핸들러와 설정 상태 초기화."""
    global _configured
    _configured = False
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.WARNING)
