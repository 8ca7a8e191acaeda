from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Dict, Generic, List, Literal, Optional, TypeVar, Union

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

MIN_YEAR = 1900
MAX_YEAR = 2100


class Genre(str, Enum):
    """Closed set of genres a movie may be tagged with (case-sensitive)"""
    ACTION = "Action"
    ADVENTURE = "Adventure"
    CRIME = "Crime"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    THRILLER = "Thriller"
    SCI_FI = "Sci-Fi"


_url_adapter = TypeAdapter(AnyUrl)


def _check_poster_url(value: str) -> str:
    # Validate only; the poster is stored exactly as the client sent it
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url_parsing", "Poster must be a valid URL")
    return value


Title = Annotated[StrictStr, Field(min_length=1)]
Year = Annotated[StrictInt, Field(ge=MIN_YEAR, le=MAX_YEAR)]
Director = Annotated[StrictStr, Field(min_length=1)]
Duration = Annotated[StrictInt, Field(gt=0)]
Poster = Annotated[StrictStr, AfterValidator(_check_poster_url)]
Genres = Annotated[List[Genre], Field(min_length=1)]
Rate = Annotated[StrictFloat, Field(ge=0, le=10)]


class MovieCreate(BaseModel):
    """Payload accepted by POST /movies"""
    model_config = ConfigDict(extra="forbid")

    title: Title
    year: Year
    director: Director
    duration: Duration
    poster: Poster
    genre: Genres
    rate: Rate = 0.0


class MoviePatch(BaseModel):
    """Payload accepted by PATCH /movies/{id}: every field optional, none defaulted"""
    model_config = ConfigDict(extra="forbid")

    title: Optional[Title] = None
    year: Optional[Year] = None
    director: Optional[Director] = None
    duration: Optional[Duration] = None
    poster: Optional[Poster] = None
    genre: Optional[Genres] = None
    rate: Optional[Rate] = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        # Absent means "leave unchanged"; an explicit null is never a valid value
        if value is None:
            raise PydanticCustomError("null_value", "{field} may not be null", {"field": info.field_name})
        return value


class Movie(MovieCreate):
    """A stored movie record"""
    id: str


class ValidationIssue(BaseModel):
    code: str
    path: List[Union[str, int]]
    message: str


class MessageResponse(BaseModel):
    message: str


DataT = TypeVar("DataT")


@dataclass(frozen=True)
class ValidationSuccess(Generic[DataT]):
    data: DataT
    success: Literal[True] = True


@dataclass(frozen=True)
class ValidationFailure:
    issues: List[ValidationIssue] = field(default_factory=list)
    success: Literal[False] = False


ValidationResult = Union[ValidationSuccess[DataT], ValidationFailure]


def issues_from_errors(errors: List[Dict[str, Any]]) -> List[ValidationIssue]:
    """Convert pydantic/FastAPI error dicts into the public issue shape"""
    return [
        ValidationIssue(code=error["type"], path=list(error["loc"]), message=error["msg"])
        for error in errors
    ]


def validate_movie(payload: Any) -> ValidationResult[MovieCreate]:
    """Full validation for create: all fields required, rate defaults to 0."""
    try:
        return ValidationSuccess(MovieCreate.model_validate(payload))
    except ValidationError as exc:
        return ValidationFailure(issues_from_errors(exc.errors()))


def validate_partial_movie(payload: Any) -> ValidationResult[Dict[str, Any]]:
    """
    Partial validation for update.

    Only the fields present in the payload are returned, so the result can be
    merged over an existing record without inventing defaults.
    """
    try:
        patch = MoviePatch.model_validate(payload)
    except ValidationError as exc:
        return ValidationFailure(issues_from_errors(exc.errors()))
    return ValidationSuccess(patch.model_dump(exclude_unset=True))
