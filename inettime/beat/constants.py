"""
# Constants shared by the units, fields, and points of Internet Time.

# [ Elements ]

# /reference_offset_seconds/
	# The fixed offset, in seconds, that Internet Time is defined relative to; UTC+1.
# /ZONE/
	# &datetime.timezone instance of &reference_offset_seconds. Biel Mean Time.
# /millis_per_day/
	# The number of milliseconds in a nominal day.
# /centibeats_per_beat/
	# The number of centibeats in a beat.
# /epoch_date/
	# The date used when a parsed text has no date components.
# /unix_epoch/
	# The UTC instant of the POSIX epoch.
"""
import datetime

reference_offset_seconds = 60 * 60
reference_offset_millis = reference_offset_seconds * 1000
ZONE = datetime.timezone(datetime.timedelta(seconds=reference_offset_seconds), 'BMT')

millis_per_second = 1000
millis_per_day = 24 * 60 * 60 * millis_per_second
max_milli_of_day = millis_per_day - 1

millis_per_beat = millis_per_day // 1000
millis_per_centibeat = millis_per_beat // 100
centibeats_per_beat = millis_per_beat // millis_per_centibeat

# Signed 64-bit limits for unit conversions.
long_max = (1 << 63) - 1
long_min = -(1 << 63)

epoch_date = datetime.date(1970, 1, 1)
unix_epoch = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
