import os
from typing import Mapping

from infrastructure.action.schemas import ActionInputs


def _input_variable_names(name: str) -> tuple[str, ...]:
    upper_name = name.replace(" ", "_").upper()
    return (f"INPUT_{upper_name}", f"INPUT_{upper_name.replace('-', '_')}")


def get_input(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Read an action input the way the Actions runner exposes it (``INPUT_API-KEY``).

    The underscored spelling (``INPUT_API_KEY``) is accepted too, since shells
    cannot export variable names containing hyphens.
    """
    env = os.environ if environ is None else environ
    for variable_name in _input_variable_names(name):
        value = env.get(variable_name)
        if value is not None and value.strip():
            return value.strip()
    return ""


def read_action_inputs(environ: Mapping[str, str] | None = None) -> ActionInputs:
    # Empty inputs fall back to the model defaults.
    values: dict[str, object] = {}
    for field_name in ActionInputs.model_fields:
        raw_value = get_input(field_name.replace("_", "-"), environ)
        if not raw_value:
            continue
        if field_name == "create_pull_request":
            values[field_name] = raw_value == "true"
        else:
            values[field_name] = raw_value
    return ActionInputs(**values)
