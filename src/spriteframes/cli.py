import logging
import os

import typer

from spriteframes.aseprite.anim import Animation, decode
from spriteframes.aseprite.element import DecodeError
from spriteframes.aseprite.mirror import mirror_horizontally
from spriteframes.aseprite.tree import renders
from spriteframes.graphics.image import animation_images
from spriteframes.kernel.preset import aseprite
from spriteframes.kernel.tree import select

app = typer.Typer()


def safe_name(name: str) -> str:
    for sep in {os.sep, os.altsep, '/'} - {None}:
        name = name.replace(sep, '_')
    return name


def load_animations(
    filename: str,
    tag: str | None,
    mirror: bool,
    strict: bool,
) -> dict[str, Animation]:
    cfg = aseprite(errors='strict') if strict else aseprite
    try:
        animations = select(tag, decode(filename, cfg))
    except (DecodeError, OSError, ValueError) as exc:
        typer.echo(f'{filename}: {exc}', err=True)
        raise typer.Exit(1) from exc
    if mirror:
        animations = {name: mirror_horizontally(anim) for name, anim in animations.items()}
    return animations


@app.callback()
def main(
    verbose: bool = typer.Option(False, '--verbose', '-v', help='log decode details'),
) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@app.command()
def info(
    filename: str = typer.Argument(..., help='sprite sheet data file (.json)'),
    tag: str | None = typer.Option(None, help='only tags matching this pattern'),
    mirror: bool = typer.Option(False, help='mirror animations horizontally'),
    strict: bool = typer.Option(False, help='fail on unknown tag directions'),
) -> None:
    typer.echo(renders(load_animations(filename, tag, mirror, strict)), nl=False)


@app.command()
def export(
    filename: str = typer.Argument(..., help='sprite sheet data file (.json)'),
    outdir: str = typer.Argument(..., help='directory to write frame images to'),
    tag: str | None = typer.Option(None, help='only tags matching this pattern'),
    mirror: bool = typer.Option(False, help='mirror animations horizontally'),
    strict: bool = typer.Option(False, help='fail on unknown tag directions'),
) -> None:
    os.makedirs(outdir, exist_ok=True)
    for name, animation in load_animations(filename, tag, mirror, strict).items():
        for idx, im in enumerate(animation_images(animation)):
            path = os.path.join(outdir, f'{safe_name(name)}_{idx:03d}.png')
            im.save(path)
            typer.echo(path)


if __name__ == '__main__':
    app()
