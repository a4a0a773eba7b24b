"""ComputeModule - Abstract base class for compute tasks."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Callable, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import ThumbnailError
from .schemas import BaseTaskParams, TaskResult

P = TypeVar("P", bound=BaseTaskParams)
Q = TypeVar("Q", bound=BaseModel)


class ComputeModule(ABC, Generic[P, Q]):
    """
    Stateless, template-method based compute module.

    - Params are validated once and passed through
    - run() does the work and returns a typed output model
    - execute() turns the outcome into a TaskResult, never raising for
      invalid params or pipeline failures
    """

    schema: type[P]

    @property
    @abstractmethod
    def task_type(self) -> str: ...

    @abstractmethod
    async def run(
        self,
        params: P,
        progress_callback: Callable[[int], None] | None = None,
    ) -> Q:
        """
        Execute task.

        - Blocking work must be offloaded from the event loop
        - Raises ThumbnailError subclasses on failure
        """
        ...

    async def execute(
        self,
        raw_params: Mapping[str, object] | P,
        progress_callback: Callable[[int], None] | None = None,
    ) -> TaskResult:
        try:
            params = self.schema.model_validate(raw_params)

            output = await self.run(params, progress_callback)

            return TaskResult.ok(output.model_dump(mode="json"))

        except ValidationError as exc:
            return TaskResult.failed(f"invalid {self.task_type} params: {exc}")

        except ThumbnailError as exc:
            return TaskResult.failed(str(exc))
