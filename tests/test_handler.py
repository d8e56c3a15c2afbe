import pytest

from cogwire.handler import DefaultHandler, RequestHandler
from cogwire.protocol import CogRequest, CogResponse
from cogwire.request import ServiceRequest
from cogwire.response import ErrorCode, Failure, Signal, Success


@pytest.mark.asyncio
async def test_default_handler_ping():
    resp = await DefaultHandler().handle(CogRequest.ping(1))
    assert resp.id == 1
    assert resp.result == Success(Signal.PONG)


@pytest.mark.asyncio
async def test_default_handler_shutdown():
    resp = await DefaultHandler().handle(CogRequest.shutdown(2, None))
    assert resp.id == 2
    assert resp.result == Success(Signal.SHUTDOWN_ACK)


@pytest.mark.asyncio
async def test_default_handler_rejects_service_request():
    request = CogRequest(3, ServiceRequest("gmail", "labels_list", {}))
    resp = await DefaultHandler().handle(request)
    assert resp.id == 3
    assert isinstance(resp.result, Failure)
    assert resp.result.error.code == ErrorCode.INTERNAL
    assert resp.result.error.message == "no handler registered for this service"


def test_request_handler_is_abstract():
    with pytest.raises(TypeError):
        RequestHandler()


@pytest.mark.asyncio
async def test_custom_handler():
    class EchoHandler(RequestHandler):
        async def handle(self, request):
            return CogResponse.ok(request.id, {"echo": request.id})

    resp = await EchoHandler().handle(CogRequest.ping(9))
    assert resp.to_dict() == {"id": 9, "result": {"echo": 9}}