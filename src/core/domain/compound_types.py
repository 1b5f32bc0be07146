"""
Compound types — Составные записи из уже валидированных значений

Собственной логики валидации не имеют: все поля являются ограниченными типами,
проверенными при создании.
"""

from pydantic import BaseModel, Field

from .simple_types import EmailAddress, String50, ZipCode


class PersonalName(BaseModel):
    """Имя и фамилия клиента"""

    first_name: String50
    last_name: String50

    model_config = {"frozen": True}


class CustomerInfo(BaseModel):
    """Информация о клиенте"""

    name: PersonalName
    email_address: EmailAddress

    model_config = {"frozen": True}


class Address(BaseModel):
    """
    Почтовый адрес.

    Строки 2-4 необязательны (None, если не указаны).
    """

    address_line1: String50
    address_line2: String50 | None = Field(None)
    address_line3: String50 | None = Field(None)
    address_line4: String50 | None = Field(None)
    city: String50
    zip_code: ZipCode

    model_config = {"frozen": True}
