"""
Ошибки сервисного слоя.

Таксономия плоская: вид ошибки (ErrorKind), сущность (ErrorEntity)
и короткий числовой код места вызова. Причина (IntegrityError, обрыв
соединения и т.п.) не разбирается, а только пристёгивается через
`raise ... from err` и пишется в лог.
"""

from enum import Enum


class ErrorKind(str, Enum):
    DATABASE = "database"
    NOT_FOUND = "not_found"


class ErrorEntity(str, Enum):
    VACANCY = "vacancy"


class VacancyOperation(Enum):
    """Места вызова в VacancyService: код + сообщение для клиента."""

    CREATE = ("01", "failed to create the vacancy")
    LIST = ("02", "failed to list the vacancies")
    GET = ("03", "failed to get the vacancy")
    GET_SKILLS = ("04", "failed to get the skills")
    GET_REQUIREMENTS = ("05", "failed to get the requirements")
    GET_RESPONSIBILITIES = ("06", "failed to get the responsibilities")
    GET_DISABILITIES = ("07", "failed to get the disabilities")
    UPDATE = ("08", "failed to update the vacancy")
    DELETE = ("09", "failed to delete the vacancy")
    LIST_DISABILITIES = ("10", "failed to get the disabilities")

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message


class ServiceError(Exception):
    """
    Структурированная ошибка сервиса.

    Attributes:
        kind: Вид ошибки
        entity: Сущность, с которой работали
        code: Код места вызова ("01", "02", ...)
        message: Сообщение без подробностей причины
        operation: Имя операции (для логов и транспорта)
        entity_id: Идентификатор сущности, если он известен
    """

    def __init__(
        self,
        *,
        kind: ErrorKind,
        entity: ErrorEntity,
        code: str,
        message: str,
        operation: str,
        entity_id: int | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.entity = entity
        self.code = code
        self.message = message
        self.operation = operation
        self.entity_id = entity_id

    @property
    def error_code(self) -> str:
        return f"{self.kind.value}:{self.entity.value}:{self.code}"

    def to_dict(self) -> dict:
        return {
            "code": self.error_code,
            "message": self.message,
            "operation": self.operation,
            "entity_id": self.entity_id,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.error_code!r}, {self.message!r})"


class VacancyServiceError(ServiceError):
    def __init__(
        self,
        operation: VacancyOperation,
        *,
        kind: ErrorKind = ErrorKind.DATABASE,
        vacancy_id: int | None = None,
    ):
        super().__init__(
            kind=kind,
            entity=ErrorEntity.VACANCY,
            code=operation.code,
            message=operation.message,
            operation=operation.name.lower(),
            entity_id=vacancy_id,
        )
        self.vacancy_operation = operation
