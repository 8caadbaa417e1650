"""Built-in action describing the keys in an armored key block."""

from typing import Any

import structlog

from ...constants import ActionType
from ...context.base import Context
from ...errors import ActionFailedError
from ...messages import ApiRequest
from ...utils.tasks import schedule
from ..base import Action, ErrorCallback, ResultCallback
from ..registry import register_action


logger = structlog.get_logger(__name__)


@register_action(
    ActionType.GET_KEY_DESCRIPTION,
    "Describe the keys contained in an ASCII-armored key block",
)
class GetKeyDescription(Action):
    """Returns a human-readable description of the keys in ``request.content``."""

    def execute(
        self,
        context: Context,
        request: ApiRequest,
        requestor: Any,
        callback: ResultCallback,
        error_callback: ErrorCallback,
    ) -> None:
        content = request.content
        if not content:
            raise ValueError("Missing required field: content")

        logger.debug("Describing key block", action=self.name, size=len(content))

        def _on_error(error: BaseException) -> None:
            logger.warning("Key description failed", action=self.name, error=str(error))
            error_callback(ActionFailedError.wrap(error))

        schedule(lambda: context.get_key_description(content), callback, _on_error)
