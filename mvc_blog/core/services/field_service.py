# mvc_blog/core/services/field_service.py
from datetime import datetime
from typing import Any, Type, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from mvc_blog.core.schemas.fields import FieldType, ModelDefinition, ModelField


class FieldService:
    """Service to extract field information from Pydantic models."""

    # Type mappings
    TYPE_MAPPINGS = {
        str: FieldType.STRING,
        int: FieldType.INTEGER,
        float: FieldType.FLOAT,
        bool: FieldType.BOOLEAN,
        datetime: FieldType.DATETIME,
        dict: FieldType.JSON,
        list: FieldType.JSON,
    }

    @classmethod
    def get_model_definition(cls, model_class: Type[BaseModel]) -> ModelDefinition:
        """Get the field definition of a model, in declaration order."""
        fields = [
            cls._parse_field(field_name, field_info)
            for field_name, field_info in model_class.model_fields.items()
            if not field_name.startswith("_")
        ]
        return ModelDefinition(model_name=model_class.__name__, fields=fields)

    @classmethod
    def _parse_field(cls, field_name: str, field_info: FieldInfo) -> ModelField:
        """Parse a single field definition."""
        field_type = cls._unwrap_optional(field_info.annotation)
        default_value = None if field_info.is_required() else field_info.get_default()

        return ModelField(
            name=field_name,
            type=cls._get_base_type(field_type),
            python_type=cls._get_python_type_name(field_type),
            is_required=field_info.is_required(),
            default_value=default_value,
            description=field_info.description or field_name.replace("_", " ").title(),
        )

    @classmethod
    def _unwrap_optional(cls, field_type: Any) -> Any:
        """Strip Optional[...] down to the wrapped type."""
        if get_origin(field_type) is Union:
            args = [arg for arg in get_args(field_type) if arg is not type(None)]
            if len(args) == 1:
                return args[0]
        return field_type

    @classmethod
    def _get_base_type(cls, field_type: Any) -> FieldType:
        """Get the base field type."""
        origin = get_origin(field_type) or field_type
        return cls.TYPE_MAPPINGS.get(origin, FieldType.STRING)

    @classmethod
    def _get_python_type_name(cls, field_type: Any) -> str:
        """Get Python type as string."""
        if hasattr(field_type, "__name__"):
            return field_type.__name__
        return str(field_type)
