# inout/yaml_loader.py
import yaml
from typing import Dict, Any
from cerberus import Validator
from formatting.exceptions import ConfigurationError
from formatting.parameters.collection import FormattingParameters, ReadOnlyFormattingParameters
from formatting.parameters.factory import create_parameter
from utils.logging_config import get_logger


logger = get_logger(__name__)

# Parameters are a list rather than a mapping so that repeated keys reach the
# bag (and fail there) instead of being collapsed by the YAML loader.
PARAMETERS_SCHEMA: Dict[str, Any] = {
    'parameters': {
        'type': 'list',
        'required': True,
        'schema': {
            'type': 'dict',
            'schema': {
                'key': {
                    'type': 'string',
                    'required': True,
                    'empty': False,
                },
                'kind': {
                    'type': 'string',
                    'required': True,
                },
                'value': {
                    'required': True,
                    'nullable': False,
                },
                'choices': {
                    'type': 'list',
                    'required': False,
                    'schema': {'type': 'string'},
                },
            },
        },
    },
}

def validate_schema(data: Dict[str, Any], schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate configuration data against a given schema.

    Args:
        data: The YAML data as a dictionary.
        schema: The Cerberus schema definition.

    Returns:
        The validated document.

    Raises:
        ConfigurationError: If validation fails.
    """
    if not isinstance(data, dict):
        logger.error("Configuration root must be a mapping, got %s.", type(data).__name__)
        raise ConfigurationError("Configuration root must be a mapping.")
    validator = Validator(schema)
    if not validator.validate(data):
        errors = validator.errors
        logger.error("YAML schema validation errors: %s", errors)
        raise ConfigurationError("YAML schema validation failed: " + str(errors))
    return validator.document

def parameters_from_config(data: Dict[str, Any]) -> FormattingParameters:
    """
    Build a parameter bag from already-loaded configuration data.

    Raises:
        ConfigurationError: On schema errors or unknown/invalid parameter kinds.
        DuplicateKeyError: If the same key is listed twice.
    """
    data = validate_schema(data, PARAMETERS_SCHEMA)
    pairs = []
    for entry in data['parameters']:
        key = entry['key']
        try:
            parameter = create_parameter(entry['kind'], entry['value'], entry.get('choices'))
        except ConfigurationError as e:
            logger.error("Error creating parameter '%s' of kind '%s': %s", key, entry['kind'], e)
            raise
        pairs.append((key, parameter))
    return FormattingParameters(pairs)

def load_parameters(yaml_file: str) -> FormattingParameters:
    """
    Read a YAML parameter file into a mutable parameter bag.

    Raises:
        ConfigurationError: If the file is not valid YAML or fails validation.
    """
    with open(yaml_file, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("Could not parse '%s': %s", yaml_file, e)
            raise ConfigurationError(f"Could not parse '{yaml_file}': {e}") from e
    parameters = parameters_from_config(data)
    logger.info("Loaded %d formatting parameter(s) from '%s'.", len(parameters), yaml_file)
    return parameters

def load_read_only_parameters(yaml_file: str) -> ReadOnlyFormattingParameters:
    """Read a YAML parameter file into a read-only parameter bag."""
    return ReadOnlyFormattingParameters(load_parameters(yaml_file))
