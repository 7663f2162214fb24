"""Fixed constants: orbital elements at epoch 1980.0, time units, phase thresholds.

Orbital elements from Duffett-Smith, "Practical Astronomy With Your Calculator"
(as used by John Walker's moontool).
"""

# Orbital elements (epoch 1980 January 0.0)
EPOCH = 2444238.5  # Julian date of 1980 January 0.0
ELONGE = 278.833540  # ecliptic longitude of the Sun at epoch 1980.0 [deg]
ELONGP = 282.596403  # ecliptic longitude of the Sun at perigee [deg]
ECCENT = 0.016718  # eccentricity of Earth's orbit
SYNMONTH = 29.53058868  # synodic month, new Moon to new Moon [days]
TROPICAL_YEAR_DAYS = 365.2422

# Moon's mean orbital elements at epoch
MOON_MEAN_LONGITUDE_EPOCH = 64.975464  # [deg]
MOON_MEAN_LONGITUDE_RATE = 13.1763966  # [deg/day]
MOON_PERIGEE_LONGITUDE_EPOCH = 349.383063  # mean longitude of perigee [deg]
MOON_MEAN_ANOMALY_RATE_OFFSET = 0.1114041  # [deg/day]

# Kepler solver
KEPLER_TOLERANCE = 1e-6  # absolute residual [rad]
KEPLER_MAX_ITERATIONS = 100

# Angle
DEGREES_PER_CIRCLE = 360.0

# Time: seconds per unit (for interval conversion)
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
J2000_MIDNIGHT_JD = 2451544.5  # Julian date of 2000 January 1, 00:00 UTC

# Defaults (configuration)
DEFAULT_FORMAT = '%p %e (%P%%)'
DEFAULT_INTERVAL = 1.0
DEFAULT_TIME_UNIT = 'day'

# Illuminated-fraction bucket edges for phase classification
NEW_MAX_FRACTION = 0.04
CRESCENT_MAX_FRACTION = 0.46
QUARTER_MAX_FRACTION = 0.54
GIBBOUS_MAX_FRACTION = 0.96
HALF_SYNMONTH = SYNMONTH / 2.0  # age beyond which the Moon is waning [days]
