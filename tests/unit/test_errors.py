"""Unit tests for error mapping."""

import httpx
import pytest

from tourmanager import MalformedResponseError, NotFoundError, TourManager, ValidationError
from tourmanager.schemas.holiday import CreateHolidayRequest


def mock_client(test_settings, handler) -> TourManager:
    """Client whose every request is answered by ``handler``."""
    return TourManager(test_settings, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_validation_error(test_settings):
    """Test HTTP 422 carries the per-field messages."""
    def handler(request):
        return httpx.Response(422, json={
            "message": "The code has already been taken.",
            "errors": {"code": ["The code has already been taken."], "name": "Too long."},
        })

    async with mock_client(test_settings, handler) as client:
        with pytest.raises(ValidationError) as exc_info:
            await client.holidays.create(CreateHolidayRequest(name="Iceland", code="ICE"))

    error = exc_info.value
    assert error.status_code == 422
    assert error.message == "The code has already been taken."
    assert error.errors == {"code": ["The code has already been taken."], "name": ["Too long."]}
    assert "code" in str(error)


@pytest.mark.asyncio
async def test_validation_error_from_fake_api(client):
    """Test missing required fields are reported by name."""
    with pytest.raises(ValidationError) as exc_info:
        await client.holidays.create({"name": "No code"})

    assert set(exc_info.value.errors) == {"code"}


def test_validation_error_without_body():
    error = ValidationError.from_body("not json")

    assert error.errors == {}
    assert str(error) == "The given data was invalid."


@pytest.mark.asyncio
async def test_not_found(test_settings):
    def handler(request):
        return httpx.Response(404, json={"message": "No query results for model [Holiday]."})

    async with mock_client(test_settings, handler) as client:
        with pytest.raises(NotFoundError) as exc_info:
            await client.holidays.find("missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.uri == "/holidays/missing"
    assert "No query results" in exc_info.value.message


@pytest.mark.asyncio
async def test_not_found_without_message(client):
    with pytest.raises(NotFoundError) as exc_info:
        await client.holidays.find("missing")

    assert exc_info.value.uri == "/holidays/missing"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 403, 409, 500, 503])
async def test_other_statuses_propagate(test_settings, status_code):
    """Test statuses without a dedicated error surface as httpx errors."""
    def handler(request):
        return httpx.Response(status_code, json={"message": "nope"})

    async with mock_client(test_settings, handler) as client:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await client.holidays.list()

    assert exc_info.value.response.status_code == status_code


@pytest.mark.asyncio
async def test_unauthenticated(client, fake_api):
    fake_api.api_key = "another-token"

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await client.user.user()

    assert exc_info.value.response.status_code == 401


@pytest.mark.asyncio
async def test_transport_error_propagates(test_settings):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with mock_client(test_settings, handler) as client:
        with pytest.raises(httpx.ConnectError):
            await client.holidays.find("hol-1")


@pytest.mark.asyncio
async def test_invalid_json_is_malformed(test_settings):
    def handler(request):
        return httpx.Response(200, content=b"<html>maintenance</html>")

    async with mock_client(test_settings, handler) as client:
        with pytest.raises(MalformedResponseError) as exc_info:
            await client.holidays.find("hol-1")

    assert exc_info.value.body == "<html>maintenance</html>"


@pytest.mark.asyncio
async def test_empty_body_is_malformed(test_settings):
    """Test an empty body where an entity is expected is an error, not None."""
    def handler(request):
        return httpx.Response(200)

    async with mock_client(test_settings, handler) as client:
        with pytest.raises(MalformedResponseError):
            await client.holidays.find("hol-1")


@pytest.mark.asyncio
async def test_wrong_shape_is_malformed(test_settings):
    def handler(request):
        return httpx.Response(200, json={"id": "hol-1", "name": "Missing timestamps"})

    async with mock_client(test_settings, handler) as client:
        with pytest.raises(MalformedResponseError) as exc_info:
            await client.holidays.find("hol-1")

    assert exc_info.value.uri == "/holidays"


@pytest.mark.asyncio
async def test_non_object_attachment_response(test_settings):
    def handler(request):
        return httpx.Response(200, json=["walking"])

    async with mock_client(test_settings, handler) as client:
        with pytest.raises(MalformedResponseError):
            await client.holidays.categories("hol-1").attach(["walking"])


@pytest.mark.asyncio
async def test_restore_with_empty_body(test_settings):
    """Test an empty restore response falls back to fetching the entity."""
    def handler(request):
        if request.method == "PUT":
            return httpx.Response(204)
        return httpx.Response(200, json={
            "id": "hol-1",
            "name": "Iceland",
            "code": "ICE",
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-02T00:00:00Z",
        })

    async with mock_client(test_settings, handler) as client:
        restored = await client.holidays.restore("hol-1")

    assert restored.id == "hol-1"
    assert restored.deleted_at is None
