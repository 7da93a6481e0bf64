#!/usr/bin/env python
"""CLI to fetch data from the iiko Cloud API and write it as JSON.

Examples:
  python scripts/fetch_iiko_data.py --resource organizations --out data/organizations.json
  python scripts/fetch_iiko_data.py --resource organizations --additional-info --include-disabled --out data/organizations.json
  python scripts/fetch_iiko_data.py --resource menus --org-ids 9b87a04a-5e2d-43d0-9206-ccac3ecd59b0 --out data/menus.json
  python scripts/fetch_iiko_data.py --resource menu --menu-id 67964 --org-ids 9b87a04a-5e2d-43d0-9206-ccac3ecd59b0 --out data/menu_67964.json

Options:
  --mock (generate offline payloads instead of calling the API)
  --verbose

Credentials come from IIKO_API_KEY (optionally IIKO_BASE_URL, IIKO_TIMEOUT),
read from the environment or a local .env file.
"""
from __future__ import annotations
import argparse
import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from iiko_api import ConfigurationError, IikoClient, IikoError, RateLimitError
from iiko_api.mock_provider import generate_mock_menu_by_id, generate_mock_menus, generate_mock_organizations, seed_mock
from iiko_api.schemas import GetMenuByIdResponse, GetMenuResponse, GetOrganizationsResponse

logger = logging.getLogger('fetch_iiko_data')

RESOURCES = ['organizations', 'menus', 'menu']


# Load a local .env if present (only fills variables that are unset or blank)
def load_env_file(env_path: Path) -> None:
    if not env_path.exists():
        return
    for line in env_path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip(); v = v.strip().strip('"').strip("'")
        existing = os.environ.get(k)
        if existing is None or existing.strip() == '':
            os.environ[k] = v


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description='Fetch iiko Cloud API data')
    p.add_argument('--resource', required=True, choices=RESOURCES)
    p.add_argument('--org-ids', help='Comma separated organization ids')
    p.add_argument('--menu-id', help='External menu id (for --resource menu)')
    p.add_argument('--additional-info', action='store_true', help='Organizations: returnAdditionalInfo')
    p.add_argument('--include-disabled', action='store_true', help='Organizations: includeDisabled')
    p.add_argument('--out', required=True, help='Output JSON file path')
    p.add_argument('--mock', action='store_true', help='Use generated payloads, no network')
    p.add_argument('--seed', type=int, help='Seed for --mock payloads')
    p.add_argument('--verbose', action='store_true')
    return p.parse_args(argv)


def _org_ids(raw: Optional[str]) -> List[str]:
    return [x.strip() for x in (raw or '').split(',') if x.strip()]


def build_organizations_request(args) -> Dict[str, Any]:
    request: Dict[str, Any] = {}
    org_ids = _org_ids(args.org_ids)
    if org_ids:
        request['organizationIds'] = org_ids
    if args.additional_info:
        request['returnAdditionalInfo'] = True
    if args.include_disabled:
        request['includeDisabled'] = True
    return request


def fetch_mock(args) -> Dict[str, Any]:
    seed_mock(args.seed)
    org_ids = _org_ids(args.org_ids)
    if args.resource == 'organizations':
        payload = generate_mock_organizations(additional_info=args.additional_info)
        return GetOrganizationsResponse.model_validate(payload).to_wire()
    if args.resource == 'menus':
        return GetMenuResponse.model_validate(generate_mock_menus()).to_wire()
    payload = generate_mock_menu_by_id(args.menu_id, org_ids or ['mock-org'])
    return GetMenuByIdResponse.model_validate(payload).to_wire()


async def fetch_live(args) -> Dict[str, Any]:
    org_ids = _org_ids(args.org_ids)
    async with IikoClient.from_env() as client:
        await client.authenticate()
        if args.resource == 'organizations':
            return (await client.get_organizations(build_organizations_request(args))).to_wire()
        if args.resource == 'menus':
            return (await client.get_menu({'organizationIds': org_ids})).to_wire()
        return (await client.get_menu_by_id({'externalMenuId': args.menu_id, 'organizationIds': org_ids})).to_wire()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='[%(levelname)s] %(message)s')
    if args.resource in ('menus', 'menu') and not _org_ids(args.org_ids):
        raise SystemExit(f'--org-ids required for {args.resource}')
    if args.resource == 'menu' and not args.menu_id:
        raise SystemExit('--menu-id required for menu')

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if args.mock:
        data = fetch_mock(args)
    else:
        load_env_file(Path('.env'))
        try:
            data = asyncio.run(fetch_live(args))
        except ConfigurationError as e:
            raise SystemExit(str(e))
        except RateLimitError as e:
            hint = f', retry after {e.retry_after}s' if e.retry_after is not None else ''
            raise SystemExit(f'Rate limited by iiko API{hint}: {e.message}')
        except IikoError as e:
            raise SystemExit(f'iiko API error ({e.kind.value}, status={e.status_code}): {e.message}')

    out_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding='utf-8')
    logger.info('Wrote %s', out_path)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
