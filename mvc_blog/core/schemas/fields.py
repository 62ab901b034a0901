# mvc_blog/core/schemas/fields.py
from typing import Any, List, Optional
from pydantic import BaseModel
from enum import Enum


class FieldType(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    JSON = "json"


class ModelField(BaseModel):
    name: str
    type: FieldType
    python_type: str
    is_required: bool = False
    default_value: Optional[Any] = None
    description: Optional[str] = None


class ModelDefinition(BaseModel):
    model_name: str
    fields: List[ModelField]
