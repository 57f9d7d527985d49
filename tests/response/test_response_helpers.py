"""Tests for JSON envelope helpers."""

import json
from datetime import datetime

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient
from pydantic import BaseModel

from controller_helper import (
    ActionResult,
    Controller,
    ControllerHelperConfig,
    clear_controllers,
    json_error,
    json_ok,
    reset_config,
    set_config,
)
from controller_helper.response import ErrorEnvelope, SuccessEnvelope


class Item(BaseModel):
    name: str
    price: float


def body(response: JSONResponse):
    return json.loads(response.body)


class TestJsonOk:
    """Test success envelopes."""

    def setup_method(self):
        reset_config()

    def teardown_method(self):
        reset_config()

    def test_envelope(self):
        response = json_ok(data={"id": 1})

        assert isinstance(response, JSONResponse)
        assert response.status_code == 200
        assert body(response) == {"success": True, "data": {"id": 1}}

    def test_without_data(self):
        assert body(json_ok()) == {"success": True, "data": None}

    def test_does_not_touch_controller_status(self):
        controller = Controller()

        json_ok(controller, [1, 2])

        assert controller.response.status_code == 200

    def test_encodes_models_and_datetimes(self):
        created = datetime(2024, 1, 2, 3, 4, 5)

        response = json_ok(data={"item": Item(name="pen", price=1.5), "at": created})

        assert body(response)["data"] == {
            "item": {"name": "pen", "price": 1.5},
            "at": "2024-01-02T03:04:05",
        }

    def test_legacy_string_flag(self):
        set_config(ControllerHelperConfig(legacy_string_success=True))

        assert body(json_ok(data=1)) == {"success": "True", "data": 1}


class TestJsonError:
    """Test error envelopes."""

    def setup_method(self):
        reset_config()

    def teardown_method(self):
        reset_config()

    def test_defaults(self):
        response = json_error()

        assert response.status_code == 400
        assert body(response) == {"success": False, "message": "", "data": None}

    def test_sets_controller_status_code(self):
        controller = Controller()

        response = json_error(controller, 404, "Not here", {"id": 7})

        assert controller.response.status_code == 404
        assert response.status_code == 404
        assert body(response) == {
            "success": False,
            "message": "Not here",
            "data": {"id": 7},
        }

    def test_default_code_from_config(self):
        set_config(ControllerHelperConfig(default_error_code=422))
        controller = Controller()

        response = json_error(controller, message="Invalid")

        assert response.status_code == 422
        assert controller.response.status_code == 422

    def test_legacy_string_flag(self):
        set_config(ControllerHelperConfig(legacy_string_success=True))

        assert body(json_error(message="x"))["success"] == "False"


class TestEnvelopeModels:
    """Test envelope model defaults."""

    def test_success_defaults(self):
        assert SuccessEnvelope().model_dump() == {"success": True, "data": None}

    def test_error_defaults(self):
        assert ErrorEnvelope().model_dump() == {
            "success": False,
            "data": None,
            "message": "",
        }


class TestEnvelopesThroughFastAPI:
    """Test envelopes returned from controller actions served by FastAPI."""

    def setup_method(self):
        clear_controllers()
        reset_config()

    def teardown_method(self):
        clear_controllers()
        reset_config()

    def _client(self) -> TestClient:
        class ItemsController(Controller):
            def show(self, item_id: int) -> ActionResult:
                if item_id <= 0:
                    return self.json_error(404, "Item not found", {"id": item_id})
                return self.json_ok({"id": item_id, "name": "pen"})

        app = FastAPI()

        @app.get("/items/{item_id}")
        def show_item(item_id: int, request: Request, response: Response):
            return ItemsController(request, response).show(item_id)

        return TestClient(app)

    def test_success(self):
        response = self._client().get("/items/3")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"id": 3, "name": "pen"}}

    def test_error(self):
        response = self._client().get("/items/0")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": "Item not found",
            "data": {"id": 0},
        }
