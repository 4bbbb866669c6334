"""Validation of shopper-supplied values against a product's options."""
import logging
import re
from catalog.models.types import ProductOptionValidationType

logger = logging.getLogger(__name__)


class OptionValidationError(ValueError):
    """Base class for option input that cannot be accepted."""


class RequiredAttributeNotProvidedError(OptionValidationError):
    def __init__(self, attribute_name):
        super().__init__(f"Required attribute not provided: {attribute_name}")
        self.attribute_name = attribute_name
        self.error_code = "REQUIRED_ATTRIBUTE_NOT_PROVIDED"
        self.error_message = str(self)


class ProductOptionValidationError(OptionValidationError):
    def __init__(self, error_code, error_message, attribute_name, value, validation_string):
        super().__init__(error_message or f"Invalid value for {attribute_name}")
        self.error_code = error_code
        self.error_message = error_message
        self.attribute_name = attribute_name
        self.value = value
        self.validation_string = validation_string


def validate_option_value(option, value):
    """Raise ProductOptionValidationError if ``value`` fails the option's rule.

    Options without a validation type, or without a pattern, accept anything.
    """
    validation_type = option.product_option_validation_type
    if validation_type is None or not option.validation_string:
        return True

    if validation_type is ProductOptionValidationType.REGEX:
        if re.fullmatch(option.validation_string, value or "") is None:
            logger.info(
                "Value %r rejected for option %s by pattern %r",
                value, option.attribute_name, option.validation_string,
            )
            raise ProductOptionValidationError(
                option.error_code,
                option.error_message,
                option.attribute_name,
                value,
                option.validation_string,
            )
    return True


def validate_product_attributes(product, attributes):
    """Check ``attributes`` (attribute_name -> value) against a product's options.

    Required options must be present and non-blank; every supplied value for
    a known option must pass that option's validation rule.
    """
    attributes = attributes or {}
    for option in product.product_options:
        value = attributes.get(option.attribute_name)
        if option.required and (value is None or not str(value).strip()):
            raise RequiredAttributeNotProvidedError(option.attribute_name)
        if value is not None:
            validate_option_value(option, str(value))
    return True
