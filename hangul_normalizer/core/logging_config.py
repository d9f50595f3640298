import logging
import sys

# 로깅 형식 설정
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: str = "WARNING", verbose: int = 0) -> str:
    """
    루트 로거를 설정합니다. verbose 한 단계마다 로그 레벨을 한 단계 낮춥니다.
    """
    level = level.upper()
    index = LOG_LEVELS.index(level) if level in LOG_LEVELS else LOG_LEVELS.index("WARNING")
    index = max(0, index - verbose)
    # stdout은 정규화 결과 전용
    logging.basicConfig(
        level=LOG_LEVELS[index],
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True,
    )
    return LOG_LEVELS[index]


def get_logger(name: str):
    """
    모듈별 로거를 반환합니다.
    """
    return logging.getLogger(name)
