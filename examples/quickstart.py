"""Astra Quickstart — decode a TLE catalog and inspect orbital elements."""

from astra import TLEError, describe, elements_array, parse_tle

# ISS (ZARYA) and Tiangong 1, three lines each. Name lines fill 24 columns.
tle_text = "\n".join([
    "ISS (ZARYA)".ljust(24),
    "1 25544U 98067A   17126.53358796  .00002780  00000-0  49495-4 0  9993",
    "2 25544  51.6401 245.6477 0005666 129.9909  47.4633 15.53976999552869",
    "TIANGONG 1".ljust(24),
    "1 37820U 11053A   17128.17101010  .00017038  00000-0  10346-3 0  9995",
    "2 37820  42.7592  83.7323 0017363 158.5208 331.2752 15.77000810321677",
])

# Decode it
sats = parse_tle(tle_text)
iss = sats[0]

print(f"Satellite: {iss.name}")
print(f"NORAD ID:  {iss.catalog_number}")
print(f"Launched:  {iss.launch_year}")
print(f"Epoch:     {iss.epoch}")
print(f"Incl:      {iss.inclination:.4f}°")
print(f"Ecc:       {iss.eccentricity:.7f}")
print(f"Period:    {1440 / iss.mean_motion:.1f} min")

for label, value in describe(iss).items():
    print(f"  {label:<20} {value}")

# Numeric columns for analysis
print(elements_array(sats).shape)

# A broken record aborts the whole decode and points at the bad field
broken = tle_text.replace("98067A", "98000A")
try:
    parse_tle(broken)
except TLEError as e:
    print(f"{e.kind.name}: {e.message} at offset {e.offset}")
