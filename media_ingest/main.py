"""Command-line entry point for the media ingestion pipeline."""

import sys
from pathlib import Path

import click

from media_ingest.config.settings import Settings
from media_ingest.ingestion.models import SourceFile, UploadFailure
from media_ingest.ingestion.orchestrator import build_orchestrator
from media_ingest.logging.logger import Log
from media_ingest.policy.models import AssetClass
from media_ingest.policy.table import POLICIES

ASSET_CLASS_NAMES: dict[str, AssetClass] = {
    "profile-photo": AssetClass.PROFILE_PHOTO,
    "vendor-logo": AssetClass.VENDOR_LOGO,
    "vendor-banner": AssetClass.VENDOR_BANNER,
    "vendor-gallery": AssetClass.VENDOR_GALLERY_IMAGE,
}

EXIT_OK = 0
EXIT_FAILED = 1


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Validate, transcode and upload marketplace images."""
    settings = Settings()
    Log.configure(settings.log_level)
    ctx.obj = settings


@cli.command("upload")
@click.argument("asset_class", type=click.Choice(list(ASSET_CLASS_NAMES)))
@click.argument("email")
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.pass_obj
def upload_command(
    settings: Settings, asset_class: str, email: str, files: tuple[Path, ...]
) -> None:
    """Upload one image, or several images to a vendor gallery."""
    target = ASSET_CLASS_NAMES[asset_class]
    if len(files) > 1 and target is not AssetClass.VENDOR_GALLERY_IMAGE:
        raise click.UsageError("Only vendor-gallery accepts more than one file")

    sources = [SourceFile.from_path(path) for path in files]
    orchestrator = build_orchestrator(settings)
    try:
        if len(sources) == 1:
            outcome = orchestrator.upload_single(sources[0], target, email)
            if isinstance(outcome, UploadFailure):
                click.echo(f"Error ({outcome.kind.value}): {outcome.message}", err=True)
                sys.exit(EXIT_FAILED)
            click.echo(outcome.url)
            return

        batch = orchestrator.upload_batch(sources, target, email)
    finally:
        orchestrator.close()

    for url in batch.succeeded_urls:
        click.echo(url)
    if not batch.ok:
        click.echo(batch.summary(len(sources)), err=True)
        sys.exit(EXIT_FAILED)


@cli.command("delete-gallery")
@click.argument("image_id")
@click.argument("email")
@click.pass_obj
def delete_gallery_command(settings: Settings, image_id: str, email: str) -> None:
    """Remove one image from a vendor gallery."""
    orchestrator = build_orchestrator(settings)
    try:
        outcome = orchestrator.delete_gallery_image(image_id, email)
    finally:
        orchestrator.close()
    if outcome.failure is not None:
        click.echo(
            f"Error ({outcome.failure.kind.value}): {outcome.failure.message}", err=True
        )
        sys.exit(EXIT_FAILED)
    click.echo(f"Deleted {image_id}")


@cli.command("policies")
def policies_command() -> None:
    """Print the upload policy for every asset class."""
    for name, asset_class in ASSET_CLASS_NAMES.items():
        policy = POLICIES[asset_class]
        types = ", ".join(sorted(policy.allowed_mime_types))
        click.echo(
            f"{name}: max {policy.max_size_mb:g}MB, {policy.max_width}x{policy.max_height}, "
            f"quality {policy.compression_quality:g}, types {types}"
        )


def main() -> None:
    """Entry point: load settings -> configure logging -> dispatch command."""
    cli()


if __name__ == "__main__":
    main()
