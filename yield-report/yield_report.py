"""CLI client for the Villa Yield API: posts a scenario and prints a terminal report.

Usage:
    python yield-report/yield_report.py --price 300000 --lease-years 25 --rate-high 150 --rate-low 100
    python yield-report/yield_report.py --price "US$ 350,000" --lease-term "30 years" --rate-high 220 --rate-low 140 --reroll
    python yield-report/yield_report.py --price 300000 --lease-years 20 --rate-high 150 --rate-low 100 \
        --fixed-cost 8:15000:"Roof replacement" --percent-cost 12:0.02:"Pool refit"
"""

import argparse
import asyncio
import sys
from pathlib import Path

import httpx

# Ensure project root is on sys.path so `src.*` imports work when run as a script
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from src.data.listing import ListingSnapshot, parse_lease_years, parse_usd_price  # noqa: E402


# ── Helpers ──────────────────────────────────────────────────────────────────

def _pct(v) -> str:
    """Format a decimal/float fraction as a percentage string."""
    if v is None:
        return "n/a"
    return f"{float(v) * 100:.2f}%"


def _dollar(v) -> str:
    if v is None:
        return "n/a"
    return f"${float(v):,.0f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def _cost_event(spec: str, mode: str) -> dict:
    """Parse YEAR:AMOUNT[:DESCRIPTION] into an additional cost payload."""
    parts = spec.split(":", 2)
    if len(parts) < 2:
        raise argparse.ArgumentTypeError(f"Expected YEAR:AMOUNT[:DESCRIPTION], got {spec!r}")
    return {
        "year": int(parts[0]),
        "amount": parts[1],
        "mode": mode,
        "description": parts[2] if len(parts) > 2 else "",
    }


# ── Report sections ──────────────────────────────────────────────────────────

def print_scenario(inputs: dict, title: str = "") -> None:
    _header(f"Scenario{': ' + title if title else ''}")
    print(f"  Property Price:   {_dollar(inputs['property_price'])}")
    print(f"  Lease Term:       {inputs['lease_years']} years")
    print(f"  Daily Rate:       {_dollar(inputs['daily_rate_low'])} low / {_dollar(inputs['daily_rate_high'])} high")
    print(f"  Occupancy:        {_pct(inputs.get('occupancy_low'))} low / {_pct(inputs.get('occupancy_high'))} high")


def print_summary(data: dict) -> None:
    _header("Summary Metrics")
    be = data.get("break_even_year")
    payback = data.get("payback_period_years")
    print(f"  Break-even Year:      {be if be is not None else 'not reached'}")
    print(f"  Payback Period:       {f'{float(payback):.1f} years' if payback is not None else 'n/a'}")
    print(f"  Avg Net Yield (5y):   {_pct(data['average_annual_net_yield_percent'])}")
    print(f"  Avg Revenue (5y):     {_dollar(data['average_first_five_years_revenue'])}")
    print(f"  Avg Costs (5y):       {_dollar(data['average_first_five_years_costs'])}")
    print(f"  Avg Net Income (5y):  {_dollar(data['average_first_five_years_income'])}")
    print(f"  Avg Daily Rate (5y):  {_dollar(data['average_first_five_years_daily_rate'])}")
    print(f"  Avg Occupancy (5y):   {_pct(data['average_first_five_years_occupancy'])}")
    print(f"  Avg Occupancy (all):  {_pct(data['average_overall_occupancy'])}")


def print_cashflow_table(data: dict) -> None:
    projections = data.get("yearly_projections", [])
    if not projections:
        return
    _header("Cash Flow Projections")
    print(
        f"  {'Yr':>3}  {'Revenue':>11}  {'Costs':>11}  {'Net':>11}  "
        f"{'Capex':>9}  {'Cumulative':>12}  {'Yield':>7}"
    )
    print(f"  {'---':>3}  {'-' * 11}  {'-' * 11}  {'-' * 11}  {'-' * 9}  {'-' * 12}  {'-' * 7}")
    for yr in projections:
        print(
            f"  {yr['year']:>3}  {_dollar(yr['revenue']):>11}  "
            f"{_dollar(yr['total_costs']):>11}  {_dollar(yr['net_profit']):>11}  "
            f"{_dollar(yr['additional_cost_in_year']):>9}  "
            f"{_dollar(yr['cumulative_cash_flow']):>12}  {_pct(yr['net_yield_percent']):>7}"
        )


def print_resale_strategy(data: dict) -> None:
    resale = data.get("resale_strategy")
    if not resale:
        return
    _header("Resale Strategy (sell after year 5)")
    print(f"  Gross Resale Value:   {_dollar(resale['gross_resale_value_before_costs'])}")
    print(f"  Sale Tax:             {_dollar(resale['sale_tax_amount'])}")
    print(f"  Agency Commission:    {_dollar(resale['agency_commission_amount'])}")
    print(f"  Net Resale Value:     {_dollar(resale['projected_resale_value'])}")
    print(f"  Final Cash Position:  {_dollar(resale['final_cumulative_cash_flow_including_resale'])}")
    print(f"  Strategy ROI:         {_pct(resale['strategy_roi_percent'])}")


def print_cost_impacts(data: dict) -> None:
    impacts = data.get("additional_cost_impacts", [])
    if not impacts:
        return
    _header("Additional Costs")
    print(f"  Total:            {_dollar(data['total_additional_costs'])}")
    print()
    for item in impacts:
        covered = item["covered_by_prior_year_profit"]
        coverage = "n/a" if covered is None else ("yes" if covered else "no")
        print(f"    Yr {item['year']:>2}  {item['description'] or '(unnamed)':<24} {_dollar(item['cost']):>10}")
        print(
            f"            prior-year profit {_dollar(item['operational_net_profit_year_prior'])}, "
            f"covered: {coverage}, cash after: {_dollar(item['cumulative_cash_flow_after_cost_in_year'])}"
        )


def build_payload(args: argparse.Namespace) -> dict:
    """Translate CLI arguments into a calculate request."""
    listing = ListingSnapshot(title=args.title or "", price=args.price, lease_term=args.lease_term)
    price = parse_usd_price(listing.price)
    lease_years = args.lease_years or parse_lease_years(listing.lease_term)
    if price is None or not lease_years:
        raise ValueError("A property price and a lease term are required.")

    inputs: dict = {
        "property_price": str(price),
        "lease_years": lease_years,
        "daily_rate_high": str(args.rate_high),
        "daily_rate_low": str(args.rate_low),
    }
    optional = {
        "occupancy_high": args.occupancy_high,
        "occupancy_low": args.occupancy_low,
    }
    inputs.update({k: str(v) for k, v in optional.items() if v is not None})

    if args.static:
        inputs.update(
            apply_inflation=False,
            fluctuate_occupancy=False,
            apply_growth_destabilization=False,
        )
    if args.no_resale:
        inputs["enable_resale_strategy"] = False

    events = [_cost_event(s, "fixed_amount") for s in args.fixed_cost or []]
    events += [_cost_event(s, "percent_of_price") for s in args.percent_cost or []]
    if events:
        inputs["enable_additional_costs"] = True
        inputs["additional_costs"] = events

    payload: dict = {"inputs": inputs, "reroll": args.reroll}
    if args.session:
        payload["session_id"] = args.session
    return payload


async def main() -> None:
    parser = argparse.ArgumentParser(description="Villa yield projection report")
    parser.add_argument("--price", required=True, help='Property price, e.g. 300000 or "US$ 350,000"')
    parser.add_argument("--lease-years", type=int, help="Lease term in years")
    parser.add_argument("--lease-term", help='Free-text lease term, e.g. "25 years"')
    parser.add_argument("--rate-high", type=float, required=True, help="High season daily rate")
    parser.add_argument("--rate-low", type=float, required=True, help="Low season daily rate")
    parser.add_argument("--occupancy-high", type=float, help="High season occupancy (0-1)")
    parser.add_argument("--occupancy-low", type=float, help="Low season occupancy (0-1)")
    parser.add_argument("--static", action="store_true", help="Disable inflation, fluctuation and destabilization")
    parser.add_argument("--no-resale", action="store_true", help="Skip the 5-year resale strategy")
    parser.add_argument("--fixed-cost", action="append", metavar="YEAR:AMOUNT[:DESC]", help="Fixed one-time cost")
    parser.add_argument("--percent-cost", action="append", metavar="YEAR:FRACTION[:DESC]", help="Cost as fraction of price")
    parser.add_argument("--reroll", action="store_true", help="Draw a new random sequence")
    parser.add_argument("--session", help="Session id owning the random sequence")
    parser.add_argument("--title", help="Listing title for the report header")
    parser.add_argument("--api-url", default="http://localhost:8000", help="API base URL")

    args = parser.parse_args()

    try:
        payload = build_payload(args)
    except (ValueError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    url = f"{args.api_url}/api/v1/yield/calculate"

    async with httpx.AsyncClient(timeout=30) as client:
        try:
            resp = await client.post(url, json=payload)
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {args.api_url}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn src.api.app:app --reload", file=sys.stderr)
            sys.exit(1)
        except httpx.TimeoutException:
            print("Error: Request timed out", file=sys.stderr)
            sys.exit(1)

        if resp.status_code != 200:
            print(f"Error: API returned {resp.status_code}", file=sys.stderr)
            try:
                detail = resp.json().get("detail", resp.text)
            except ValueError:
                detail = resp.text
            print(f"  {detail}", file=sys.stderr)
            sys.exit(1)

        data = resp.json()

    print_scenario(payload["inputs"], title=args.title or "")
    print_summary(data)
    print_cashflow_table(data)
    print_resale_strategy(data)
    print_cost_impacts(data)
    print()


if __name__ == "__main__":
    asyncio.run(main())
