from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import SimpleTestCase, TestCase
from rest_framework.test import APIClient

from core.models import MawbInfo
from core.money import d, d_or_zero, floor_cents, q2, q3
from mawb_engine.errors import InvalidInput


class DecimalHelperTests(SimpleTestCase):
    def test_d_accepts_numbers_and_numeric_strings(self):
        self.assertEqual(d(5), Decimal("5"))
        self.assertEqual(d(" 12.50 "), Decimal("12.50"))
        self.assertEqual(d(Decimal("0.1")), Decimal("0.1"))
        # floats go through str() so 0.1 stays 0.1
        self.assertEqual(d(0.1), Decimal("0.1"))

    def test_d_rejects_non_numbers(self):
        for bad in (None, True, "", "12,5", "abc", "Infinity", "NaN", object()):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidInput):
                    d(bad, field="amount")

    def test_error_names_the_field(self):
        with self.assertRaises(InvalidInput) as ctx:
            d("x", field="gross_weight")
        self.assertEqual(ctx.exception.field, "gross_weight")
        self.assertTrue(str(ctx.exception).startswith("gross_weight: "))

    def test_blank_values_count_as_zero(self):
        self.assertEqual(d_or_zero(None), Decimal("0"))
        self.assertEqual(d_or_zero("  "), Decimal("0"))
        self.assertEqual(d_or_zero("3"), Decimal("3"))
        with self.assertRaises(InvalidInput):
            d_or_zero("three")

    def test_rounding(self):
        self.assertEqual(q2(Decimal("2083.375")), Decimal("2083.38"))
        self.assertEqual(q2(Decimal("0.005")), Decimal("0.01"))
        self.assertEqual(q3(Decimal("0.0005")), Decimal("0.001"))
        self.assertEqual(floor_cents(Decimal("8.8888")), Decimal("8.88"))
        self.assertEqual(floor_cents(Decimal("8.8899")), Decimal("8.88"))
        self.assertEqual(floor_cents(Decimal("200")), Decimal("200.00"))

    def test_rounding_past_decimal_precision_is_invalid_input(self):
        for fn in (q2, q3, floor_cents):
            with self.subTest(fn=fn.__name__):
                with self.assertRaises(InvalidInput) as ctx:
                    fn(Decimal("1e30"), field="total_fee")
                self.assertEqual(ctx.exception.field, "total_fee")


class MawbInfoTests(TestCase):
    def test_defaults_and_str(self):
        info = MawbInfo.objects.create(
            mawb="217-12345675", date=date(2025, 9, 25), service_type="EXPORT", shipping_type="AIR",
        )
        info.refresh_from_db()
        self.assertEqual(str(info), "217-12345675")
        self.assertEqual(info.chargeable_weight, Decimal("0.00"))
        self.assertIsNotNone(info.created_at)


class MawbInfoApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=get_user_model().objects.create_user(username="ops", password="pw"))

    def _create(self, mawb, day, **extra):
        body = {"mawb": mawb, "date": day, "service_type": "EXPORT", "shipping_type": "AIR", **extra}
        return self.client.post("/api/mawbinfo/", body, format="json")

    def test_create_and_get(self):
        res = self._create("217-12345675", "2025-09-25", chargeable_weight="120.5")
        self.assertEqual(res.status_code, 201, res.content)
        body = res.json()
        self.assertEqual(body["chargeable_weight"], "120.50")

        res = self.client.get(f"/api/mawbinfo/{body['uuid']}/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["mawb"], "217-12345675")
        self.assertEqual(res.json()["date"], "2025-09-25")

    def test_required_fields_and_bad_values_are_rejected(self):
        res = self.client.post("/api/mawbinfo/", {"mawb": "217-1"}, format="json")
        self.assertEqual(res.status_code, 400)
        for field in ("date", "service_type", "shipping_type"):
            self.assertIn(field, res.json())

        res = self._create("217-1", "25/09/2025")
        self.assertEqual(res.status_code, 400)
        self.assertIn("date", res.json())

        res = self._create("217-1", "2025-09-25", chargeable_weight="-1")
        self.assertEqual(res.status_code, 400)
        self.assertIn("chargeable_weight", res.json())

    def test_duplicate_mawb_is_rejected(self):
        self.assertEqual(self._create("217-12345675", "2025-09-25").status_code, 201)
        res = self._create("217-12345675", "2025-09-26")
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["mawb"], ["mawb already exists"])
        self.assertEqual(MawbInfo.objects.count(), 1)

    def test_list_filters_by_date_range(self):
        self._create("217-1", "2025-09-01")
        self._create("217-2", "2025-09-15")
        self._create("217-3", "2025-10-01")

        res = self.client.get("/api/mawbinfo/")
        self.assertEqual([r["mawb"] for r in res.json()], ["217-3", "217-2", "217-1"])

        res = self.client.get("/api/mawbinfo/", {"start_date": "2025-09-10", "end_date": "2025-09-30"})
        self.assertEqual([r["mawb"] for r in res.json()], ["217-2"])

        res = self.client.get("/api/mawbinfo/", {"start_date": "2025-13-01"})
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["code"], "invalid_input")

    def test_delete(self):
        info_uuid = self._create("217-12345675", "2025-09-25").json()["uuid"]

        res = self.client.delete(f"/api/mawbinfo/{info_uuid}/")
        self.assertEqual(res.status_code, 204)
        self.assertFalse(MawbInfo.objects.exists())

        res = self.client.get(f"/api/mawbinfo/{info_uuid}/")
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json()["code"], "not_found")
        self.assertEqual(self.client.delete(f"/api/mawbinfo/{info_uuid}/").status_code, 404)
