"""
youtu-client - метаданные пакета

Используются в User-Agent исходящих запросов (версия дублируется в pyproject.toml).
"""

__product__ = "youtu-client"
__version__ = "0.1.0"
__description__ = "Клиент облачного API распознавания изображений Youtu"
__license__ = "MIT"
__status__ = "Alpha"
__python_requires__ = ">=3.9"


def get_user_agent() -> str:
    """Значение заголовка User-Agent"""
    return f"{__product__}/{__version__}"
