"""Template Writer Adapter - Edits the compiled CloudFormation template on disk."""
import json
import os
from typing import Any

# Template written by `serverless package` for stack updates
DEFAULT_TEMPLATE_PATH = os.path.join(".serverless", "cloudformation-template-update-stack.json")


class JsonTemplateWriter:
    """
    Implementation of TemplatePort over a compiled JSON template file.

    The file is read and rewritten on every call, other sections are left
    as they are.
    """

    def __init__(self, template_path: str = DEFAULT_TEMPLATE_PATH):
        """
        Initialize the template writer.

        Args:
            template_path: Path of the compiled template
        """
        self._template_path = template_path

    def write_template_output(self, key: str, descriptor: dict[str, Any]) -> None:
        """
        Add or replace an output in the template.

        Raises:
            FileNotFoundError: If the template has not been compiled yet
            ValueError: If the file does not hold a JSON object
        """
        template = self.read_template()
        outputs = template.setdefault("Outputs", {})
        outputs[key] = descriptor

        with open(self._template_path, "w", encoding="utf-8") as template_file:
            json.dump(template, template_file, indent=2)

    def read_template(self) -> dict[str, Any]:
        """Load the compiled template."""
        with open(self._template_path, encoding="utf-8") as template_file:
            template = json.load(template_file)

        if not isinstance(template, dict):
            raise ValueError(f"Template {self._template_path} is not a JSON object")
        return template
