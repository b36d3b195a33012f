"""
Bookstore API - Generic CRUD Service
=====================================

What:  The request pipeline shared by the Books and Authors endpoints.
How:   Every operation follows the same steps:

    log attempt → validate input → check existence → repository call
        → map → log outcome → return (or raise)

    Outcomes are expressed as exceptions that the global handlers in
    main.py translate into responses:

        BadRequestError      → 400
        NotFoundError        → 404
        InternalServerError  → 500 (generic message)

Failure Boundary:
    Each operation body runs inside `failure_boundary(location)`. Anything
    raised that is not one of the three outcomes above (database driver
    errors, mapping errors, bugs) is logged at ERROR as
    "<location> : <error> - <cause>" and re-raised as InternalServerError.

Concurrency:
    Existence check and mutation are separate statements. A record deleted
    by another request in between makes update/delete report failure,
    which surfaces as a 500.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from bookstore.database import Base
from bookstore.exceptions import (
    BadRequestError,
    InternalServerError,
    NotFoundError,
)
from bookstore.repositories.base import SQLAlchemyRepository
from bookstore.services.mapper import Mapper

ModelT = TypeVar("ModelT", bound=Base)
ResponseT = TypeVar("ResponseT", bound=BaseModel)
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)

# Outcomes the pipeline raises on purpose; everything else is a fault
_EXPECTED_ERRORS = (BadRequestError, NotFoundError, InternalServerError)


@asynccontextmanager
async def failure_boundary(logger: logging.Logger, location: str) -> AsyncIterator[None]:
    """Converts unexpected exceptions into a logged InternalServerError."""
    try:
        yield
    except _EXPECTED_ERRORS:
        raise
    except Exception as exc:
        cause = exc.__cause__ or exc.__context__
        logger.error("%s : %s - %s", location, exc, cause if cause is not None else "")
        raise InternalServerError(
            context={"location": location, "error_type": type(exc).__name__}
        ) from exc


def internal_error(logger: logging.Logger, message: str) -> InternalServerError:
    """Logs a reported failure and returns the exception for the caller to raise."""
    logger.error(message)
    return InternalServerError(context={"detail": message})


class CrudService(Generic[ModelT, ResponseT, CreateT, UpdateT]):
    """
    CRUD handler for one entity type.

    Subclasses bind the ORM model, the response schema and the entity name
    used in log messages. Collaborators are injected per request by the
    route dependencies.
    """

    entity_name: str = "Record"
    model: Type[ModelT]
    response_schema: Type[ResponseT]

    def __init__(
        self,
        repository: SQLAlchemyRepository[ModelT],
        mapper: Mapper,
        logger: logging.Logger,
    ):
        self.repository = repository
        self.mapper = mapper
        self.logger = logger

    async def list(self, location: str) -> List[ResponseT]:
        async with failure_boundary(self.logger, location):
            self.logger.info("%s : Attempted call", location)
            records = await self.repository.find_all()
            response = self.mapper.map_all(records, self.response_schema)
            self.logger.info("%s : Successful", location)
            return response

    async def get(self, location: str, entity_id: int) -> ResponseT:
        async with failure_boundary(self.logger, location):
            self.logger.info("%s : Attempted Get %s by ID : %s", location, self.entity_name, entity_id)
            record = await self.repository.find_by_id(entity_id)
            if record is None:
                self.logger.warning(
                    "%s : %s with ID : %s was not found", location, self.entity_name, entity_id
                )
                raise NotFoundError(resource=self.entity_name, resource_id=entity_id)
            response = self.mapper.map(record, self.response_schema)
            self.logger.info("%s : Successfully Got %s by ID : %s", location, self.entity_name, entity_id)
            return response

    async def create(self, location: str, payload: Optional[CreateT]) -> ResponseT:
        async with failure_boundary(self.logger, location):
            self.logger.info("%s : %s Submission Attempted", location, self.entity_name)
            if payload is None:
                self.logger.warning("%s : Empty request was submitted", location)
                raise BadRequestError("Request body is required")

            entity = self.mapper.map(payload, self.model)
            if not await self.repository.create(entity):
                raise internal_error(self.logger, f"{location} : {self.entity_name} Creation Failed")

            self.logger.info("%s : %s created successfully (id=%s)", location, self.entity_name, entity.id)
            return self.mapper.map(entity, self.response_schema)

    async def update(self, location: str, entity_id: int, payload: Optional[UpdateT]) -> None:
        async with failure_boundary(self.logger, location):
            self.logger.info("%s : %s Update Attempted with id : %s", location, self.entity_name, entity_id)
            if entity_id < 1 or payload is None or entity_id != payload.id:
                self.logger.warning("%s : %s Update Failed - Bad Request", location, self.entity_name)
                raise BadRequestError(
                    "Path id must be positive and match the body id",
                    context={"path_id": entity_id, "body_id": getattr(payload, "id", None)},
                )

            if not await self.repository.exists(entity_id):
                self.logger.warning(
                    "%s : %s with id : %s was not found", location, self.entity_name, entity_id
                )
                raise NotFoundError(resource=self.entity_name, resource_id=entity_id)

            entity = self.mapper.map(payload, self.model)
            if not await self.repository.update(entity):
                raise internal_error(self.logger, f"{location} : {self.entity_name} Update Failed")

            self.logger.info("%s : %s data was updated successfully", location, self.entity_name)

    async def delete(self, location: str, entity_id: int) -> None:
        async with failure_boundary(self.logger, location):
            self.logger.info("%s : %s Delete Attempted with id : %s", location, self.entity_name, entity_id)
            if entity_id < 1:
                self.logger.warning("%s : %s Delete Failed - Bad Request", location, self.entity_name)
                raise BadRequestError("Id must be positive", context={"path_id": entity_id})

            if not await self.repository.exists(entity_id):
                self.logger.warning(
                    "%s : %s with id : %s was not found", location, self.entity_name, entity_id
                )
                raise NotFoundError(resource=self.entity_name, resource_id=entity_id)

            record = await self.repository.find_by_id(entity_id)
            if record is None or not await self.repository.delete(record):
                raise internal_error(self.logger, f"{location} : {self.entity_name} Delete Failed")

            self.logger.info("%s : %s data was deleted successfully", location, self.entity_name)
