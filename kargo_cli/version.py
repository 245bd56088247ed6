import importlib.metadata
import os
import sys

import click
import yaml
from pydantic import BaseModel, ConfigDict, Field


def get_kargo_version():
    return importlib.metadata.version("kargo")


def get_cli_path():
    """Get the path of the current kargo CLI package"""
    return os.path.dirname(os.path.abspath(__file__))


def version_msg():
    return f"kargo v{get_kargo_version()} from {get_cli_path()} (Python {sys.version})"


class KargoVersion(BaseModel):
    git_version: str = Field(alias="gitVersion")
    python_version: str = Field(alias="pythonVersion")

    model_config = ConfigDict(populate_by_name=True)

    def dump_json(self):
        return self.model_dump_json(indent=4, by_alias=True)

    def dump_yaml(self):
        return yaml.safe_dump(self.model_dump(mode="json", by_alias=True), indent=2)


def version_obj():
    return KargoVersion(git_version=get_kargo_version(), python_version=sys.version)


@click.command()
@click.option("-o", "--output", type=click.Choice(["json", "yaml"]), default=None, help="Output format")
def version(output):
    """Get the current kargo version"""
    if output == "json":
        click.echo(version_obj().dump_json())
    elif output == "yaml":
        click.echo(version_obj().dump_yaml())
    else:
        click.echo(version_msg())
