# apps/categories/forms.py
from django import forms
from django.core.validators import MinLengthValidator

from apps.catalogs.models import Category, fold_name

NAME_ERROR = "Category name must contain at least 3 characters"
DESCRIPTION_ERROR = "Description must not be empty."
DUPLICATE_ERROR = "Category already exists."
NAME_LENGTH_ERROR = "Category name is too long."


class CategoryNameForm(forms.ModelForm):
    """Formulaire de mise à jour : seul le nom est modifiable."""

    class Meta:
        model = Category
        fields = ["name"]
        labels = {"name": "Name"}
        widgets = {
            "name": forms.TextInput(attrs={"class": "form-control", "placeholder": "ex: Hat"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        name = self.fields["name"]
        name.validators.append(MinLengthValidator(3))
        name.error_messages.update({"required": NAME_ERROR, "min_length": NAME_ERROR})

    def clean_name(self):
        name = self.cleaned_data["name"]
        # la forme NFKC peut allonger le nom au-delà de la colonne name_key
        if len(fold_name(name)) > Category._meta.get_field("name_key").max_length:
            raise forms.ValidationError(NAME_LENGTH_ERROR, code="max_length")
        return name


class CategoryForm(CategoryNameForm):

    class Meta(CategoryNameForm.Meta):
        fields = ["name", "description"]
        labels = {"name": "Name", "description": "Description"}
        widgets = {
            **CategoryNameForm.Meta.widgets,
            "description": forms.Textarea(attrs={"class": "form-control", "rows": 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["description"].error_messages.update({"required": DESCRIPTION_ERROR})
