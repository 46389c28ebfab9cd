# portal/forms.py
from django import forms
from academics.models import Department
from .models import Notice

INPUT_CLASS = "w-full border-c rounded px-3 py-2"


class NoticeForm(forms.ModelForm):
    class Meta:
        model = Notice
        fields = ("title", "content", "type", "is_important", "expires_at", "image_url", "department")
        widgets = {
            "title": forms.TextInput(attrs={"class": INPUT_CLASS}),
            "content": forms.Textarea(attrs={"class": INPUT_CLASS, "rows": 5}),
            "type": forms.Select(attrs={"class": INPUT_CLASS}),
            "expires_at": forms.DateTimeInput(attrs={"class": INPUT_CLASS, "type": "datetime-local"}),
            "image_url": forms.URLInput(attrs={"class": INPUT_CLASS}),
            "department": forms.Select(attrs={"class": INPUT_CLASS}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["department"].queryset = Department.objects.all().order_by("name")
        self.fields["department"].required = False
        self.fields["expires_at"].required = False
        self.fields["image_url"].required = False
        self.fields["type"].required = False

    def clean_title(self):
        title = (self.cleaned_data.get("title") or "").strip()
        if len(title) < 3:
            raise forms.ValidationError("Title must be at least 3 characters")
        return title

    def clean_content(self):
        content = (self.cleaned_data.get("content") or "").strip()
        if len(content) < 10:
            raise forms.ValidationError("Content must be at least 10 characters")
        return content

    def clean_type(self):
        return self.cleaned_data.get("type") or "GENERAL"
