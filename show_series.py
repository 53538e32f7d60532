"""Print an hourly EIA series."""

from datetime import date

from eia_feed.data import EiaFetcher


# US nuclear capacity outage, hourly
ENERGY_SERIES = "EBA.AZPS-ALL.D.H"


def main() -> None:
    with EiaFetcher() as fetcher:
        batch = fetcher.fetch_series(ENERGY_SERIES, request_date=date.today())

    if batch.is_empty:
        print("No data available. Check EIA_API_KEY.")
        return

    print(f"\n{batch.series_id} - requested {batch.request_date}")
    print("=" * 60)
    for obs in batch:
        print(f"  {obs.timestamp:%Y-%m-%d %H:%M} -> {obs.end:%H:%M} | {obs.value:>12.2f}")

    frame = batch.to_frame()
    print("\n" + "-" * 60)
    print(f"Range: {frame['value'].min():.2f} - {frame['value'].max():.2f}")
    print(f"Mean: {frame['value'].mean():.2f}")


if __name__ == "__main__":
    main()
