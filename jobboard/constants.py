from enum import Enum


class VacancyContractType(str, Enum):
    CLT = "clt"
    PJ = "pj"
    INTERNSHIP = "internship"
    TEMPORARY = "temporary"


CNPJ_LENGTH = 14
PHONE_MAX_LENGTH = 13
COMPANY_NAME_MAX_LENGTH = 200
