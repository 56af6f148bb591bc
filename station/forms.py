"""
Forms for the station API with proper validation.
"""
from django import forms

from core.models import Station


class StationNameField(forms.CharField):
    """CharField that refuses JSON numbers, lists and objects instead of str()-ing them."""

    def to_python(self, value):
        if value not in self.empty_values and not isinstance(value, str):
            raise forms.ValidationError('Station name must be a string.', code='invalid')
        return super().to_python(value)


class StationForm(forms.ModelForm):
    """
    Validates the body of POST /stations.

    The model CharField strips whitespace, so a blank or whitespace-only name
    fails the required check.
    """

    class Meta:
        model = Station
        fields = ['name']
        field_classes = {'name': StationNameField}

    def error_details(self):
        """Field errors as {field: [message, ...]} for JSON responses."""
        return {
            field: [error['message'] for error in errors]
            for field, errors in self.errors.get_json_data().items()
        }
