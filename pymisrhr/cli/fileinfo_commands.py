"""
Filename CLI Commands for PyMisrHR

Prints the MISR identifiers (PATH, ORBIT, BLOCK, CAMERA, MODE, version)
encoded in product filenames.

Author: B.G.
"""

import sys

import click

import pymisrhr as pmh


@click.command()
@click.argument("filenames", nargs=-1, required=True)
def fileinfo(filenames):
    """
    Print the identifiers found in one or more MISR product FILENAMES.

    Examples:

        pmh-fileinfo MISR_AM1_GRP_TERRAIN_GM_P168_O068050_AN_F03_0024.hdf
    """
    failed = False
    for name in filenames:
        try:
            info = pmh.filenames.parse_filename(name)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            failed = True
            continue
        fields = ", ".join(
            f"{key}={value}" for key, value in info.as_dict().items() if value is not None
        )
        click.echo(f"{info.filename}: {fields}")
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    fileinfo()
