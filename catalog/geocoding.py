# catalog/geocoding.py

import logging
import re

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

PINCODE_RE = re.compile(r'^[1-9][0-9]{5}$')


class GeocodingError(Exception):
    pass


def _headers():
    # Nominatim refuses anonymous clients
    return {'User-Agent': settings.GEOCODER_USER_AGENT, 'Accept': 'application/json'}


"""
Turns free text into (lat, lng) with the first Nominatim hit.
Raises GeocodingError when nothing matches or the service fails.
"""
def geocode_address(address):
    address = (address or '').strip()
    if not address:
        raise GeocodingError("An address is required.")
    try:
        response = requests.get(
            settings.GEOCODER_URL,
            params={'format': 'json', 'q': address},
            headers=_headers(),
        )
        response.raise_for_status()
        results = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("Geocoding request failed for %r: %s", address, e)
        raise GeocodingError("Failed to fetch location for this address.") from e

    if not results:
        raise GeocodingError("Could not find coordinates for this location.")
    try:
        return float(results[0]['lat']), float(results[0]['lon'])
    except (KeyError, TypeError, ValueError) as e:
        raise GeocodingError("The geocoder returned an unreadable location.") from e


"""
Two chained lookups for the session form's map marker: first confirm the
postal code exists with the postal API, then geocode "<pincode>, India".
Returns a dict with the address used, the coordinates and the district
the postal API reported.
"""
def lookup_pincode(pincode):
    pincode = (pincode or '').strip()
    if not PINCODE_RE.match(pincode):
        raise GeocodingError("Please enter a valid 6-digit Indian pincode.")

    try:
        response = requests.get(f"{settings.POSTAL_LOOKUP_URL}{pincode}", headers=_headers())
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("Postal lookup failed for %s: %s", pincode, e)
        raise GeocodingError("Failed to fetch location for pincode.") from e

    entry = payload[0] if isinstance(payload, list) and payload else {}
    post_offices = entry.get('PostOffice') or []
    if entry.get('Status') != 'Success' or not post_offices:
        raise GeocodingError("No data found for this pincode.")

    address = f"{pincode}, India"
    lat, lng = geocode_address(address)
    return {
        'address': address,
        'lat': lat,
        'lng': lng,
        'district': post_offices[0].get('District', ''),
        'state': post_offices[0].get('State', ''),
    }
