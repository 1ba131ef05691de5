import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(service_name: str, log_dir: Optional[Union[str, Path]] = 'logs', level: str = 'INFO') -> logging.Logger:
    """
    Настраивает логирование для указанного сервиса.

    Логи пишутся в консоль и, если задан log_dir, в файл
    {log_dir}/{service_name}.log с ротацией (10 MB, 5 бекапов).
    Повторный вызов заменяет хендлеры, а не дублирует их.

    :param service_name: Имя сервиса (строка)
    :param log_dir: Папка для лог-файлов или None - только консоль
    :param level: Имя уровня логирования
    :return: Логгер для сервиса
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    log_level = logging.getLevelName(level.upper())

    logger = logging.getLogger(service_name)
    logger.setLevel(log_level)

    # Закрываем и очищаем существующие хендлеры
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    if log_dir:
        logs_path = Path(log_dir)
        logs_path.mkdir(parents=True, exist_ok=True, mode=0o755)

        service_handler = RotatingFileHandler(
            str(logs_path / f'{service_name}.log'),
            maxBytes=10*1024*1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        service_handler.setFormatter(formatter)
        service_handler.setLevel(log_level)
        logger.addHandler(service_handler)

    return logger


def read_recent_lines(service_name: str, log_dir: Union[str, Path] = 'logs', lines: int = 50) -> List[str]:
    """
    Возвращает последние строки лог-файла сервиса.

    :param service_name: Имя сервиса
    :param log_dir: Папка с лог-файлами
    :param lines: Количество строк
    :return: Список строк; пустой, если файла нет
    """
    file_path = Path(log_dir) / f'{service_name}.log'
    if not file_path.exists():
        return []

    with open(file_path, 'r', encoding='utf-8') as f:
        content = f.readlines()

    return content[-lines:] if lines > 0 else []
