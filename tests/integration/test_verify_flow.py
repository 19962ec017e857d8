# tests/integration/test_verify_flow.py
"""Integration tests for the verification endpoints."""

import logging
from dataclasses import replace

import pytest
from coincurve import PrivateKey

from config.settings import settings
from src.dex_auth.signature import ckb_blake2b
from src.dex_ledger.domain.models import Cell, TransactionSnapshot, Witness
from tests.factories import (
    BUYER_ARGS,
    PRICE_5,
    SELLER_ARGS,
    UNIT,
    matched_transaction,
    transaction_json,
)

pytestmark = pytest.mark.asyncio(loop_scope="session")


class TestHealth:
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestVerifyOrderPath:
    async def test_buyer_fill_accepted(self, client):
        body = transaction_json(matched_transaction(BUYER_ARGS))
        resp = await client.post("/api/v1/transactions/verify", json=body)
        assert resp.status_code == 200
        payload = resp.json()
        assert payload["code"] == 0
        assert payload["data"] == {"accepted": True, "path": "ORDER"}
        assert payload["request_id"].startswith("req_")

    async def test_seller_fill_accepted(self, client):
        body = transaction_json(matched_transaction(SELLER_ARGS))
        resp = await client.post("/api/v1/transactions/verify", json=body)
        assert resp.status_code == 200
        assert resp.json()["data"]["accepted"] is True

    async def test_underpaid_buy_rejected(self, client):
        tx = matched_transaction(BUYER_ARGS)
        cheaper = replace(tx.outputs[0], capacity=tx.outputs[0].capacity + UNIT)
        tx = replace(tx, outputs=(cheaper, tx.outputs[1]))
        resp = await client.post("/api/v1/transactions/verify", json=transaction_json(tx))
        assert resp.status_code == 422
        payload = resp.json()
        assert payload["code"] == 15
        assert payload["data"] is None

    async def test_mismatched_counts_rejected(self, client):
        tx = matched_transaction()
        tx = replace(tx, outputs=tx.outputs[:1])
        resp = await client.post("/api/v1/transactions/verify", json=transaction_json(tx))
        assert resp.status_code == 400
        assert resp.json()["code"] == 9

    async def test_bad_hex_is_validation_error(self, client):
        body = transaction_json(matched_transaction())
        body["script_args"] = "0xzz"
        resp = await client.post("/api/v1/transactions/verify", json=body)
        assert resp.status_code == 422

    async def test_too_wide_transaction_rejected(self, client):
        cell = Cell(1, BUYER_ARGS, b"")
        wide = (cell,) * (settings.MAX_TRANSACTION_CELLS + 1)
        tx = TransactionSnapshot(script_args=BUYER_ARGS, inputs=wide, outputs=wide)
        resp = await client.post("/api/v1/transactions/verify", json=transaction_json(tx))
        assert resp.status_code == 422


class TestVerifySignaturePath:
    async def test_owner_cancellation_accepted(self, client):
        key = PrivateKey(b"\x05" * 32)
        owner = ckb_blake2b(key.public_key.format(compressed=True))[:20]
        message = b"\x33" * 32
        witness = message + key.sign_recoverable(message, hasher=None)
        tx = TransactionSnapshot(
            script_args=owner,
            inputs=(Cell(2000 * UNIT, owner, b""),),
            outputs=(Cell(1999 * UNIT, owner, b""),),
            witnesses=(Witness(input_type=witness),),
        )
        resp = await client.post("/api/v1/transactions/verify", json=transaction_json(tx))
        assert resp.status_code == 200
        assert resp.json()["data"] == {"accepted": True, "path": "SIGNATURE"}

    async def test_stranger_cancellation_rejected(self, client):
        message = b"\x33" * 32
        witness = message + PrivateKey(b"\x06" * 32).sign_recoverable(message, hasher=None)
        tx = matched_transaction(witnesses=(Witness(input_type=witness),))
        resp = await client.post("/api/v1/transactions/verify", json=transaction_json(tx))
        assert resp.status_code == 422
        assert resp.json()["code"] == 5


class TestOrderCodecEndpoints:
    async def test_decode_open_order(self, client):
        encode_resp = await client.post("/api/v1/orders/encode", json={
            "sudt_amount": 50 * UNIT,
            "dealt_amount": 50 * UNIT,
            "undealt_amount": 150 * UNIT,
            "price": PRICE_5,
            "order_type": 0,
        })
        assert encode_resp.status_code == 200
        data = encode_resp.json()["data"]["data"]
        assert len(bytes.fromhex(data[2:])) == 57

        decode_resp = await client.post("/api/v1/orders/decode", json={"data": data})
        assert decode_resp.status_code == 200
        decoded = decode_resp.json()["data"]
        assert decoded["undealt_amount"] == 150 * UNIT
        assert decoded["price"] == PRICE_5
        assert decoded["settled"] is False

    async def test_encode_settled(self, client):
        resp = await client.post("/api/v1/orders/encode", json={
            "sudt_amount": 200 * UNIT, "settled": True,
        })
        assert resp.json()["data"]["data"] == "0x00c817a8040000000000000000000000"

    async def test_decode_wrong_length(self, client):
        resp = await client.post("/api/v1/orders/decode", json={"data": "0x00ff"})
        assert resp.status_code == 400
        assert resp.json()["code"] == 8

    async def test_encode_out_of_range_is_validation_error(self, client):
        resp = await client.post("/api/v1/orders/encode", json={
            "sudt_amount": 1, "price": 1 << 64,
        })
        assert resp.status_code == 422


class TestVerdictLog:
    async def test_accepted_path_logged(self, client, caplog):
        body = transaction_json(matched_transaction(SELLER_ARGS))
        with caplog.at_level(logging.INFO, logger="dex.request"):
            resp = await client.post("/api/v1/transactions/verify", json=body)
        assert resp.status_code == 200
        assert "path=ORDER" in caplog.text
        assert resp.json()["request_id"] in caplog.text

    async def test_rejection_code_logged(self, client, caplog):
        tx = matched_transaction()
        tx = replace(tx, outputs=tx.outputs[:1])
        with caplog.at_level(logging.INFO, logger="dex.request"):
            resp = await client.post("/api/v1/transactions/verify", json=transaction_json(tx))
        assert resp.status_code == 400
        records = [r for r in caplog.records if r.name == "dex.request"]
        assert records and records[-1].levelno == logging.WARNING
        assert "code=9" in records[-1].getMessage()

    async def test_schema_error_has_no_verdict(self, client, caplog):
        body = transaction_json(matched_transaction())
        body["script_args"] = "0xzz"
        with caplog.at_level(logging.INFO, logger="dex.request"):
            await client.post("/api/v1/transactions/verify", json=body)
        records = [r for r in caplog.records if r.name == "dex.request"]
        assert records[-1].getMessage().split()[-2] == "-"
