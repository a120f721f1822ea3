from dataclasses import replace

import typer

from agro_registry.application.use_cases.seed_sample_data import SeedSampleDataUseCase
from agro_registry.config import settings
from agro_registry.domain.errors import DomainError
from agro_registry.logging_config import configure_logging
from agro_registry.presentation.container import Services, build_services, build_store

app = typer.Typer(help="Agro Registry CLI")

DbPathOption = typer.Option(
    None, "--db-path", "-d", help="SQLite file to use (defaults to AGRO_DB_PATH)"
)


def _services(db_path: str | None) -> Services:
    configure_logging(settings.log_level)
    # seed and stats always persist to SQLite, whatever AGRO_STORE says
    cfg = replace(settings, store="sqlite", db_path=db_path or settings.db_path)
    return build_services(build_store(cfg))


@app.command()
def seed(db_path: str | None = DbPathOption) -> None:
    """Wipe the store and load the sample producers, farms, harvests and crops."""
    services = _services(db_path)
    uc = SeedSampleDataUseCase(services.producers, services.farms, services.harvests, services.crops)
    try:
        result = uc.execute()
    except DomainError as exc:
        typer.echo(f"Seed failed: {exc.message}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Producers: {result.producers}")
    typer.echo(f"Farms: {result.farms}")
    typer.echo(f"Harvests: {result.harvests}")
    typer.echo(f"Crops: {result.crops}")


@app.command()
def stats(db_path: str | None = DbPathOption) -> None:
    """Print the dashboard figures."""
    dashboard = _services(db_path).dashboard
    s = dashboard.get_stats()
    typer.echo(f"Producers: {s.total_producers}")
    typer.echo(f"Farms: {s.total_farms}")
    typer.echo(f"Crops: {s.total_crops}")
    typer.echo(f"Total area: {s.total_hectares:,.2f} ha")
    for row in dashboard.get_farms_by_state():
        typer.echo(f"  {row.state}: {row.count} farm(s)")
    for row in dashboard.get_crops_by_type():
        typer.echo(f"  {row.crop}: {row.area:,.2f} ha")
    for row in dashboard.get_land_use():
        typer.echo(f"  {row.type}: {row.area:,.2f} ha")


@app.command()
def serve(
    host: str = typer.Option(settings.api_host, "--host"),
    port: int = typer.Option(settings.api_port, "--port", "-p"),
    reload: bool = typer.Option(False, "--reload"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("agro_registry.presentation.api.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
