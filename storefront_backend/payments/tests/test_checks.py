# payments/tests/test_checks.py

from django.test import SimpleTestCase, override_settings

from admin_console.checks import check_admin_credentials
from payments.checks import check_payhere_config


class StartupCheckTests(SimpleTestCase):
    def test_configured_settings_pass(self):
        self.assertEqual(check_payhere_config(None), [])
        self.assertEqual(check_admin_credentials(None), [])

    @override_settings(PAYMENTS={"PAYHERE": {"MERCHANT_ID": "", "MERCHANT_SECRET": ""}})
    def test_missing_merchant_config(self):
        ids = {e.id for e in check_payhere_config(None)}

        self.assertEqual(ids, {"payments.E001", "payments.E002"})

    @override_settings(ADMIN_USERNAME="", ADMIN_PASSWORD="")
    def test_missing_admin_credentials(self):
        ids = {e.id for e in check_admin_credentials(None)}

        self.assertEqual(ids, {"admin_console.E001", "admin_console.E002"})
