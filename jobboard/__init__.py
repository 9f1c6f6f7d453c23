"""Бэкенд доски вакансий: компании, вакансии и их доступность для людей с инвалидностью."""

__version__ = "0.1.0"
