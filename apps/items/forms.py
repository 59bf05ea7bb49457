# apps/items/forms.py
from django import forms

from apps.catalogs.models import Category, Item

NAME_ERROR = "Item name must not be empty."
CATEGORY_ERROR = "Category must be selected."
PRICE_ERROR = "Price must be a whole number of cents, at least 1."
QUANTITY_ERROR = "Quantity must be a whole number, 0 or more."


class ItemForm(forms.ModelForm):
    category = forms.ModelChoiceField(
        label="Category",
        queryset=Category.objects.order_by("name", "id"),
        empty_label="Select…",
        error_messages={"required": CATEGORY_ERROR, "invalid_choice": CATEGORY_ERROR},
        widget=forms.Select(attrs={"class": "form-select"}),
    )
    price_in_cents = forms.IntegerField(
        label="Price (cents)",
        min_value=1,
        error_messages={"required": PRICE_ERROR, "invalid": PRICE_ERROR, "min_value": PRICE_ERROR},
        widget=forms.NumberInput(attrs={"class": "form-control", "min": 1}),
    )
    quantity = forms.IntegerField(
        label="Quantity",
        min_value=0,
        error_messages={"required": QUANTITY_ERROR, "invalid": QUANTITY_ERROR, "min_value": QUANTITY_ERROR},
        widget=forms.NumberInput(attrs={"class": "form-control", "min": 0}),
    )

    class Meta:
        model = Item
        fields = ["name", "category", "price_in_cents", "quantity"]
        labels = {"name": "Name"}
        widgets = {
            "name": forms.TextInput(attrs={"class": "form-control", "placeholder": "ex: Cap"}),
        }
        error_messages = {"name": {"required": NAME_ERROR}}

    def __init__(self, *args, using=None, **kwargs):
        super().__init__(*args, **kwargs)
        if using is not None:
            self.fields["category"].queryset = self.fields["category"].queryset.using(using)
