from django import forms
from django.conf import settings


class JsonForm(forms.Form):
    """Form fed from a decoded JSON body. Declared fields must arrive as strings."""

    def clean(self):
        cleaned = super().clean()
        for name in self.fields:
            if name in self.data and not isinstance(self.data[name], str):
                self.add_error(name, "Must be a string.")
        return cleaned


class LoginForm(JsonForm):
    # Compared against the allow-list as sent; the client normalises case.
    username = forms.CharField(strip=False)


class MessageForm(JsonForm):
    sender = forms.CharField(strip=False)
    text = forms.CharField(strip=False)

    def clean_text(self):
        text = self.cleaned_data["text"]
        if not text.strip():
            raise forms.ValidationError("Message text is empty.")
        if len(text) > settings.CHAT_MAX_CONTENT_LEN:
            raise forms.ValidationError("Message text is too long.")
        return text
