"""Base controller."""

from typing import Any, Dict, Generic, List, Tuple, TypeVar

from pydantic import BaseModel, ValidationError

from mvc_blog.core.bases.base_view import BaseView
from mvc_blog.core.exceptions import ValidationException
from mvc_blog.core.logging import get_logger
from mvc_blog.core.response.schemas import ErrorDetail

ModelType = TypeVar("ModelType", bound=BaseModel)
ViewType = TypeVar("ViewType", bound=BaseView)


def _error_details(field: str, error: ValidationError) -> List[ErrorDetail]:
    return [
        ErrorDetail(field=field, code=err["type"].upper(), message=err["msg"])
        for err in error.errors()
    ]


class BaseController(Generic[ModelType, ViewType]):
    """Base controller mediating between one model and one view.

    The controller does not own either object; both can be shared with other
    controllers and outlive this one.
    """

    fields: Tuple[str, ...] = ()

    def __init__(self, model: ModelType, view: ViewType):
        self._model = model
        self._view = view
        self.logger = get_logger(f"controllers.{self.__class__.__name__}")

    @property
    def model(self) -> ModelType:
        return self._model

    @property
    def view(self) -> ViewType:
        return self._view

    # ----------------- Delegation ----------------- #
    def _check_field(self, name: str) -> None:
        if name not in self.fields:
            raise ValidationException(
                f"Unknown field '{name}'",
                [ErrorDetail(field=name, code="UNKNOWN_FIELD", message="Field is not exposed by this controller")],
            )

    def get_field(self, name: str) -> Any:
        """Return the model's current value for a field."""
        self._check_field(name)
        return getattr(self._model, name)

    def set_field(self, name: str, value: Any) -> None:
        """Replace the model's value for a field."""
        self._check_field(name)
        try:
            setattr(self._model, name, value)
        except ValidationError as e:
            raise ValidationException(
                f"Invalid value for '{name}'", _error_details(name, e)
            ) from e
        self.logger.debug("Set %s.%s", self._model.__class__.__name__, name)

    def apply_update(self, update_data: BaseModel) -> Dict[str, Any]:
        """Set every field of an update schema that is not None.

        All names are checked before any field is written. Returns the applied
        values.
        """
        changes = update_data.model_dump(exclude_none=True)
        for name in changes:
            self._check_field(name)
        for name, value in changes.items():
            self.set_field(name, value)
        return changes

    def snapshot(self) -> Dict[str, Any]:
        """Current values of the exposed fields, in declaration order."""
        return {name: getattr(self._model, name) for name in self.fields}

    def update_view(self) -> None:
        raise NotImplementedError
