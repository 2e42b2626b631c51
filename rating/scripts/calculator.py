"""
Carrier Rate Calculator
=======================

CLI tool to rate one shipment against one or more carriers from a JSON
record store.

With one --carrier the full breakdown for that carrier is printed. With
several, every carrier is rated concurrently and the quotes are compared.

Usage:
    python -m rating.scripts.calculator --store store.json --shipment shipment.json --carrier C1
    python -m rating.scripts.calculator --store store.json --shipment shipment.json --carrier C1 --carrier C2
    python -m rating.scripts.calculator --store store.json --shipment shipment.json --carrier C1 --json
"""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime

from rating.calculate_rates import calculate_rates
from rating.data.loaders import load_store
from rating.models import ShipmentDescription
from rating.results import IneligibleResult, RatingResponse, format_number
from rating.shopping import ShoppingResult, shop_rates
from rating.version import VERSION


def load_shipment(path: str) -> ShipmentDescription:
    with open(path, "r", encoding="utf-8") as f:
        return ShipmentDescription.model_validate(json.load(f))


def print_response(response: RatingResponse) -> None:
    """Print one carrier's priced shipment."""
    metrics = response.shipment_metrics
    weight_unit = metrics.weight_unit

    print("\n" + "=" * 60)
    print(f"{response.carrier.name or response.carrier.id} - {response.rate_card.name or response.rate_card.id}")
    print("=" * 60)

    # Shipment summary
    print(f"\nRoute: {metrics.route.origin_zone} -> {metrics.route.destination_zone} ({metrics.distance} miles)")
    print(f"Pieces: {metrics.total_pieces} in {metrics.package_count} package line(s)")
    print(f"Actual weight: {metrics.total_weight:.2f} {weight_unit}")
    print(f"DIM weight: {metrics.dimensional_weight:.2f} {weight_unit} (factor {metrics.dim_factor})")
    print(f"Chargeable weight: {metrics.chargeable_weight:.2f} {weight_unit}")
    print(f"Skid equivalents: {metrics.skid_equivalents}")

    # Cost breakdown
    print(f"\n--- Rate Breakdown ({response.rate_card.structure}) ---")
    for line in response.rate_breakdown:
        print(f"{line.code:<5} {line.charge_name:<40} ${line.charge:>9.2f}")

    print(f"{'':<46}{'-' * 10}")
    print(f"{'Base total:':<46}${response.base_total:>9.2f}")
    if response.additional_services_total > 0:
        print(f"{'Additional services:':<46}${response.additional_services_total:>9.2f}")
    print(f"{'':<46}{'=' * 10}")
    print(f"{'TOTAL (' + response.currency + '):':<46}${response.final_total:>9.2f}")

    print(f"\nTransit: {response.transit_time}")
    print(f"Service level: {response.service_level}")
    print(f"Notes: {response.notes}")
    print()


def print_ineligible(result: IneligibleResult) -> None:
    print(f"\nCarrier {result.carrier_id} is not eligible for this shipment:")
    for reason in result.reasons:
        print(f"  - {reason}")


def print_shopping(result: ShoppingResult) -> None:
    """Print a quote comparison across carriers."""
    print("\n" + "=" * 60)
    print("RATE COMPARISON")
    print("=" * 60)

    if result.quotes:
        print(f"\n{'Carrier':<25} {'Structure':<20} {'Transit':<20} {'Total':>10}")
        for quote in result.quotes:
            print(
                f"{(quote.carrier.name or quote.carrier.id):<25} "
                f"{quote.rate_card.structure:<20} "
                f"{quote.transit_time:<20} "
                f"{format_number(quote.final_total):>10}"
            )

        comparison = result.comparison
        print(f"\nCheapest:    {comparison.cheapest.carrier.id} (${comparison.cheapest.final_total:.2f})")
        print(f"Fastest:     {comparison.fastest.carrier.id} ({comparison.fastest.transit_time})")
        print(f"Recommended: {comparison.recommended.carrier.id}")
        price_range = comparison.price_range
        print(
            f"Price range: ${price_range.min:.2f} - ${price_range.max:.2f} "
            f"(avg ${price_range.average:.2f})"
        )
    else:
        print("\nNo quotes.")

    for ineligible in result.ineligible:
        print_ineligible(ineligible)
    for failure in result.failures:
        print(f"\nCarrier {failure.carrier_id} failed: {failure.error}")
    print()


async def run(args: argparse.Namespace) -> None:
    store = load_store(args.store)
    shipment = load_shipment(args.shipment)
    now = datetime.fromisoformat(args.now) if args.now else None

    if len(args.carrier) > 1:
        result = await shop_rates(args.carrier, shipment, store, now=now)
        if args.json:
            print(json.dumps(result.to_dict(), indent=2, default=str))
        else:
            print_shopping(result)
        return

    response = await calculate_rates(args.carrier[0], shipment, store, now=now)
    if args.json:
        print(json.dumps(response.to_dict(), indent=2, default=str))
    elif isinstance(response, IneligibleResult):
        print_ineligible(response)
    else:
        print_response(response)


def main():
    parser = argparse.ArgumentParser(
        description=f"Rate a shipment against carrier rate cards (version {VERSION})",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m rating.scripts.calculator --store store.json --shipment shipment.json --carrier C1
  python -m rating.scripts.calculator --store store.json --shipment shipment.json --carrier C1 --carrier C2
  python -m rating.scripts.calculator --store store.json --shipment shipment.json --carrier C1 --now 2026-01-15T00:00:00Z
        """
    )
    parser.add_argument(
        "--store",
        required=True,
        help="JSON file with carriers, rateCards, weightRules and dimensionRules"
    )
    parser.add_argument(
        "--shipment",
        required=True,
        help="JSON file describing the shipment"
    )
    parser.add_argument(
        "--carrier",
        required=True,
        action="append",
        help="Carrier id to rate (repeat to compare carriers)"
    )
    parser.add_argument(
        "--now",
        help="ISO timestamp used for rate card recency (default: current time)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw response as JSON"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        print("\n\nCancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
