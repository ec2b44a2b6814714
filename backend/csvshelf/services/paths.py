"""
Storage Path Resolver
설정된 저장소 디렉터리의 절대 경로 계산 및 생성
"""
import os
import logging
from pathlib import Path

from csvshelf.config import StorageConfig
from csvshelf.services.errors import RepositoryError

logger = logging.getLogger(__name__)


def resolve_repository_root(config: StorageConfig) -> Path:
    """
    저장소 루트 경로 반환 (없으면 상위 디렉터리까지 생성)

    상대 경로는 현재 작업 디렉터리 기준으로 해석
    """
    root = Path(os.getcwd(), config.repository_root).resolve()
    logger.debug(f"Repository root: {root}")

    if not root.is_dir():
        try:
            root.mkdir(mode=0o777, parents=True, exist_ok=True)
        except OSError as exc:
            raise RepositoryError(f"cannot create repository root {root}: {exc}") from exc
        logger.info(f"Created repository root {root}")

    return root
