"""BDD tests for inbound callback verification."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from logistics.api.routes import notify_router
from logistics.config import set_notify_credentials
from logistics.credentials import Credentials
from logistics.notifications import set_notification_handler
from logistics.security.checkmac import CHECK_MAC_FIELD, CheckMacEncoder
from pytest_bdd import given, parsers, scenarios, then, when

HASH_KEY = "5294y06JbISpM5x9"
HASH_IV = "v77hoKGq4kWxNNIS"

scenarios("features/callback_verification.feature")


@pytest.fixture()
def received():
    calls = []
    set_notification_handler(lambda kind, result: calls.append((kind, result)))
    return calls


def _status_fields(logistics_id):
    return {
        "MerchantID": "2000132",
        "MerchantTradeNo": "ORDER001",
        "RtnCode": "2067",
        "RtnMsg": "Picked up by customer",
        "AllPayLogisticsID": logistics_id,
        "LogisticsType": "CVS",
        "LogisticsSubType": "UNIMARTC2C",
        "GoodsAmount": "500",
        "UpdateStatusDate": "2024/01/18 19:42:10",
    }


@given("the callback service trusts the stage test credentials", target_fixture="client")
def callback_service(received):
    set_notify_credentials(Credentials("2000132", HASH_KEY, HASH_IV))
    app = FastAPI()
    app.include_router(notify_router)
    return TestClient(app)


@given(
    parsers.cfparse('a status callback for logistics order "{logistics_id}" signed with the merchant credentials'),
    target_fixture="callback",
)
def signed_callback(logistics_id):
    return CheckMacEncoder(HASH_KEY, HASH_IV).encode_payload(_status_fields(logistics_id))


@given(
    parsers.cfparse(
        'a status callback for logistics order "{logistics_id}" signed with key "{hash_key}" and IV "{hash_iv}"'
    ),
    target_fixture="callback",
)
def foreign_callback(logistics_id, hash_key, hash_iv):
    return CheckMacEncoder(hash_key, hash_iv).encode_payload(_status_fields(logistics_id))


@given(parsers.cfparse('the callback field "{field}" is altered to "{value}"'))
def alter_callback(callback, field, value):
    assert field != CHECK_MAC_FIELD
    callback[field] = value


@when(parsers.cfparse('the callback is posted to "{path}"'), target_fixture="response")
def post_callback(client, callback, path):
    return client.post(path, data=callback)


@then(parsers.cfparse('the response is "{body}"'))
def response_body(response, body):
    assert response.status_code == 200
    assert response.text == body


@then(parsers.cfparse("the response status is {status:d}"))
def response_status(response, status):
    assert response.status_code == status


@then(parsers.cfparse('the handler received a "{kind}" notification for "{logistics_id}"'))
def handler_received(received, kind, logistics_id):
    assert len(received) == 1
    assert received[0][0] == kind
    assert received[0][1].all_pay_logistics_id == logistics_id


@then("the handler received nothing")
def handler_received_nothing(received):
    assert received == []
