"""
Утилиты приложения.

Вспомогательные функции, которые используются в разных частях приложения.
"""

from jobboard.utils.categories import dedupe_categories, disability_categories

__all__ = [
    "dedupe_categories",
    "disability_categories",
]
