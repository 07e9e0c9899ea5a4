# admin_console/forms.py

from django import forms

from admin_console.config import AdminCredentials

INVALID_CREDENTIALS = "Invalid username or password"


class AdminLoginForm(forms.Form):
    username = forms.CharField(max_length=150)
    password = forms.CharField(widget=forms.PasswordInput)

    def clean(self):
        cleaned = super().clean()
        if self.errors:
            return cleaned

        credentials = AdminCredentials.from_settings()
        if not credentials.check(cleaned.get("username"), cleaned.get("password")):
            raise forms.ValidationError(INVALID_CREDENTIALS, code="invalid_login")
        return cleaned
