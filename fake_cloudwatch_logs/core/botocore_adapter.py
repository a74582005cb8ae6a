"""
Botocore Client Adapter

Lets a real ``boto3.client("logs")`` talk to the in-memory store without any
network traffic. Two handlers are registered on the client's event system:

1. ``before-parameter-build``: stashes the caller's (unserialized) parameters
   in the request context.
2. ``before-call``: short-circuits the HTTP request. Returning an
   ``(http_response, parsed_response)`` pair from this event makes botocore
   skip the endpoint entirely and treat the pair as the service's answer.

Domain errors become 400 responses carrying the service error code, which
botocore turns into the client's modeled exceptions
(``client.exceptions.ResourceNotFoundException`` and friends). Consistency
errors are caller bugs and propagate unchanged.
"""

import logging
import uuid
from typing import Any, Callable, Dict, Optional

from botocore.awsrequest import AWSResponse

from ..exceptions import ConsistencyError, FakeCloudWatchLogsError
from ..models import TenantScope

logger = logging.getLogger(__name__)

PARAMS_CONTEXT_KEY = "fake_cloudwatch_logs.params"

Dispatch = Callable[[str, Dict[str, Any], TenantScope], Dict[str, Any]]


def _response_metadata(status_code: int, request_id: str) -> Dict[str, Any]:
    return {
        'RequestId': request_id,
        'HTTPStatusCode': status_code,
        'HTTPHeaders': {'x-amzn-requestid': request_id},
        'RetryAttempts': 0,
    }


def build_error_response(error: FakeCloudWatchLogsError, request_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Map a domain exception to a botocore-parsed error response.

    Args:
        error: Domain exception raised by a handler
        request_id: Request id to report (random if None)

    Returns:
        Parsed error response with ``Error.Code`` and ``Error.Message``
    """
    request_id = request_id or str(uuid.uuid4())
    return {
        'Error': {
            'Code': error.error_code or 'InternalFailure',
            'Message': error.message,
        },
        'ResponseMetadata': _response_metadata(400, request_id),
    }


def build_success_response(body: Dict[str, Any], request_id: Optional[str] = None) -> Dict[str, Any]:
    """Attach ResponseMetadata to a camelCase operation result."""
    request_id = request_id or str(uuid.uuid4())
    response = dict(body)
    response['ResponseMetadata'] = _response_metadata(200, request_id)
    return response


class BotocoreAttachment:
    """
    Event handlers binding one botocore client to a dispatch function.

    Args:
        client: A botocore/boto3 client for the ``logs`` service
        dispatch: ``(operation, params, scope) -> camelCase dict``
        account: Account used for every call made through this client
    """

    def __init__(self, client, dispatch: Dispatch, account: str):
        self.client = client
        self.dispatch = dispatch
        self.account = account

        service_id = client.meta.service_model.service_id.hyphenize()
        self._param_event = f"before-parameter-build.{service_id}"
        self._call_event = f"before-call.{service_id}"
        self._unique_id = f"fake-cloudwatch-logs-{uuid.uuid4()}"

    def attach(self) -> 'BotocoreAttachment':
        """Register the handlers on the client."""
        events = self.client.meta.events
        events.register(self._param_event, self._capture_params, unique_id=f"{self._unique_id}-params")
        events.register(self._call_event, self._serve, unique_id=f"{self._unique_id}-call")
        logger.info(f"Attached fake CloudWatch Logs to client in {self.client.meta.region_name}")
        return self

    def detach(self) -> None:
        """Unregister the handlers; the client talks to its endpoint again."""
        events = self.client.meta.events
        events.unregister(self._param_event, unique_id=f"{self._unique_id}-params")
        events.unregister(self._call_event, unique_id=f"{self._unique_id}-call")

    def _capture_params(self, params, context, **kwargs):
        context[PARAMS_CONTEXT_KEY] = dict(params)

    def _serve(self, model, context, **kwargs):
        region = context.get('client_region') or self.client.meta.region_name
        scope = TenantScope(account=self.account, region=region)
        params = context.get(PARAMS_CONTEXT_KEY, {})
        request_id = str(uuid.uuid4())

        try:
            body = self.dispatch(model.name, params, scope)
        except ConsistencyError:
            raise
        except FakeCloudWatchLogsError as e:
            logger.error(f"{model.name} failed for {scope}: {e}")
            return self._http_response(400, request_id), build_error_response(e, request_id)

        return self._http_response(200, request_id), build_success_response(body, request_id)

    def _http_response(self, status_code: int, request_id: str) -> AWSResponse:
        return AWSResponse(
            url=f"https://logs.{self.client.meta.region_name}.amazonaws.com/",
            status_code=status_code,
            headers={'x-amzn-requestid': request_id},
            raw=None,
        )
