"""
File Tools — Пути относительно корня процесса и запись текста

Модуль предоставляет:
- Корень иерархии проекта (рабочая директория процесса или заданный root)
- Построение абсолютных путей относительно корня
- Запись текста в файл с созданием или усечением

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Относительный путь присоединяется к корню (ведущий разделитель игнорируется, ".." не нормализуется)
2. Текст кодируется ДО открытия файла: ошибка кодирования не трогает файл
3. Переводы строк записываются как есть, без платформенной трансляции
4. Ошибки файловой системы пробрасываются как OSError, не подавляются
"""

import codecs
from pathlib import Path, PurePath
from typing import Optional, Union

import structlog
from pydantic import BaseModel, Field, field_validator

from nmlibs.core.contracts import FileWriteError, require_non_null

logger = structlog.get_logger(__name__)

PathLike = Union[str, PurePath]


# =============================================================================
# CONFIG
# =============================================================================


class FileToolsConfig(BaseModel):
    """
    Конфигурация файловых утилит.

    root=None означает текущую рабочую директорию процесса в момент вызова.
    """

    root: Optional[Path] = Field(None, description="Корень для относительных путей")
    encoding: str = Field("utf-8", min_length=1, description="Кодировка текста")

    model_config = {"frozen": True}

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Проверка, что кодировка известна codecs и кодирует str в bytes"""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")
        # rot13, hex и т.п. известны codecs, но не являются текстовыми кодировками
        try:
            "".encode(v)
        except LookupError:
            raise ValueError(f"Not a text encoding: {v}")
        return v


_DEFAULT_CONFIG = FileToolsConfig()


# =============================================================================
# PATHS
# =============================================================================


def get_root(config: Optional[FileToolsConfig] = None) -> Path:
    """
    Корень иерархии проекта.

    Returns:
        Абсолютный путь: config.root (если задан) или текущая рабочая директория
    """
    cfg = config or _DEFAULT_CONFIG
    if cfg.root is not None:
        return Path(cfg.root).absolute()
    return Path.cwd()


def resolve_path(base: PathLike, relative: PathLike) -> Path:
    """
    Абсолютный путь к relative относительно base.

    Ведущие разделители relative игнорируются: "/data/x.txt" и "data/x.txt"
    дают один и тот же результат. Путь не нормализуется: сегменты ".."
    сохраняются и могут указывать за пределы base.

    Args:
        base: Базовая директория
        relative: Путь относительно base

    Returns:
        Абсолютный путь (без разрешения symlink)

    Raises:
        NullArgumentError: Если base или relative is None

    Examples:
        >>> resolve_path("/srv/app", "/data/x.txt").as_posix()
        '/srv/app/data/x.txt'
    """
    require_non_null(base, "The base path cannot be None")
    require_non_null(relative, "The relative path cannot be None")

    parts = PurePath(relative).parts
    if parts and PurePath(relative).anchor:
        parts = parts[1:]
    return Path(base, *parts).absolute()


def from_root(path: PathLike, config: Optional[FileToolsConfig] = None) -> Path:
    """
    Абсолютный путь к файлу или директории относительно корня.

    Args:
        path: Путь относительно get_root()
        config: Конфигурация (default: рабочая директория процесса)

    Returns:
        Абсолютный путь
    """
    return resolve_path(get_root(config), path)


# =============================================================================
# WRITING
# =============================================================================


def write_file(path: PathLike, text: str, config: Optional[FileToolsConfig] = None) -> None:
    """
    Запись text в файл path.

    Файл создаётся, если отсутствует, и усекается, если существует.
    Родительские директории не создаются.

    Args:
        path: Путь к файлу
        text: Записываемый текст
        config: Конфигурация (кодировка; default: utf-8)

    Raises:
        NullArgumentError: Если path или text is None
        FileWriteError: Если text не может быть закодирован (файл не изменяется)
        OSError: При ошибке создания или записи файла
    """
    require_non_null(path, "The path cannot be None")
    require_non_null(text, "The text cannot be None")
    cfg = config or _DEFAULT_CONFIG
    target = Path(path)

    try:
        data = text.encode(cfg.encoding)
    except UnicodeEncodeError as e:
        logger.warning("file_write_failed", path=str(target), encoding=cfg.encoding, reason=str(e))
        raise FileWriteError(f"Cannot encode text for {target} as {cfg.encoding}: {e}") from e

    with open(target, "wb") as f:
        f.write(data)

    logger.info("file_written", path=str(target), chars=len(text), bytes=len(data))
