"""
Custom Django model fields for common patterns.
"""
from django.core.exceptions import ValidationError
from django.db import models

from .enums import LabeledEnum


class LabeledEnumDescriptor:
    """
    Converts the stored lowercase string to its enum instance on attribute
    access.  Class access returns the field itself (for admin/meta access).
    """

    def __init__(self, field):
        self.field = field

    def __get__(self, instance, owner):
        if instance is None:
            return self.field

        value = instance.__dict__.get(self.field.attname)
        if value is None or isinstance(value, self.field.enum_class):
            return value
        try:
            return self.field.to_python(value)
        except ValidationError:
            return self.field.enum_class.default()

    def __set__(self, instance, value):
        instance.__dict__[self.field.attname] = value


class LabeledEnumField(models.CharField):
    """
    Stores a LabeledEnum as its lowercase name (VARCHAR) and always hands
    back enum instances.  Choices are not put on the column, so adding enum
    members never requires a migration.
    """

    description = "A field for storing LabeledEnum values as lowercase strings"

    def __init__(self, enum_class, *args, **kwargs):
        if not issubclass(enum_class, LabeledEnum):
            raise TypeError(f"{enum_class} must be a subclass of LabeledEnum")
        self.enum_class = enum_class

        if 'max_length' not in kwargs:
            max_len = max(len(str(e)) for e in enum_class)
            kwargs['max_length'] = max(32, max_len + 10)
        if 'default' not in kwargs:
            kwargs['default'] = str(enum_class.default())

        super().__init__(*args, **kwargs)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        kwargs['enum_class'] = self.enum_class
        return name, path, args, kwargs

    def from_db_value(self, value, expression, connection):
        if value is None:
            return None
        return self.enum_class.from_name_safe(value)

    def to_python(self, value):
        if value is None or isinstance(value, self.enum_class):
            return value
        try:
            return self.enum_class.from_name(str(value))
        except ValueError as e:
            raise ValidationError(
                f"Invalid value '{value}' for {self.enum_class.__name__}: {e}"
            )

    def get_prep_value(self, value):
        if value is None:
            return None
        return str(self.to_python(value))

    def value_to_string(self, obj):
        value = self.value_from_object(obj)
        if value is None:
            return None
        return str(value)

    def validate(self, value, model_instance):
        # Skip CharField's choice validation: membership is checked
        # against the enum class instead.
        if value is None:
            if not self.null:
                raise ValidationError("This field cannot be null.")
            return
        self.to_python(value)
        return

    def formfield(self, **kwargs):
        from django import forms

        defaults = {
            'form_class': forms.TypedChoiceField,
            'choices': self.enum_class.choices(),
            'coerce': lambda val: self.to_python(val) if val else None,
        }
        defaults.update(kwargs)
        return super(models.CharField, self).formfield(**defaults)

    def contribute_to_class(self, cls, name, **kwargs):
        super().contribute_to_class(cls, name, **kwargs)
        setattr(cls, name, LabeledEnumDescriptor(self))
