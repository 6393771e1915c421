"""
# Primary public module.

# Provides access to the point type, &InternetTime, its fields and units, and the
# alignment of standard temporals to beat boundaries with &to_start_of.

#!python
	from inettime.beat import library as libbeat
	it = libbeat.now()
	print(libbeat.format.OFFSET_DATE_CENTIBEATS.format(it))
"""
from . import core
from . import fields
from . import units
from . import standard
from . import format

from .types import InternetTime
from .fields import BEAT_OF_DAY, CENTIBEAT_OF_DAY, CENTIBEAT_OF_BEAT
from .units import BEAT, CENTIBEAT
from .constants import ZONE
from .format import beat_formatter

__shortname__ = 'libbeat'

def now(clock=None) -> InternetTime:
	"""
	# The current point in time; see &InternetTime.now.
	"""
	return InternetTime.now(clock)

def of(date, beat:int, centibeat:int=0, offset=ZONE) -> InternetTime:
	"""
	# Construct from components; see &InternetTime.of.
	"""
	return InternetTime.of(date, beat, centibeat, offset)

def parse(text:str, formatter=format.OFFSET_DATE_CENTIBEATS) -> InternetTime:
	"""
	# Parse &text into an &InternetTime.

	#!python
		it = libbeat.parse("2025-10-12+01:00 @000.00")
	"""
	return InternetTime.parse(text, formatter)

def to_start_of(field, temporal):
	"""
	# Align &temporal to the beginning of &field's unit; the beat or the centibeat.
	# The result has the same type as &temporal.

	# &InternetTime instances already aligned are returned unchanged. Temporals with
	# an offset are aligned at the reference offset and keep their own offset;
	# digits below the millisecond are discarded. Temporals without an offset
	# are aligned according to their local time of day.

	# [ Parameters ]
	# /field/
		# One of the &fields.Field instances, or its unit identifier.
	# /temporal/
		# The point to align.
	"""
	if field is None:
		raise core.MissingArgument('field')
	if temporal is None:
		raise core.MissingArgument('temporal')

	if not isinstance(field, fields.Field):
		f = fields.select(field)
		if f is None:
			raise core.UnsupportedTemporalType("not an Internet Time field: " + repr(field))
		field = f

	if isinstance(temporal, InternetTime):
		if temporal.centibeat_of_beat == 0 or field.unit is units.CENTIBEAT:
			return temporal
		return temporal.update(CENTIBEAT_OF_BEAT, 0)

	millis = standard.milli_of_day(temporal)
	if millis is None:
		raise core.UnsupportedTemporalType(
			"cannot align %s to %s" %(temporal.__class__.__name__, field.name)
		)

	offset = standard.offset_seconds(temporal)
	if offset is None:
		return standard.replace_milli_of_day(temporal, field.truncate(millis))

	normalized = fields.normalize(millis, offset)
	# Discard sub-millisecond digits before shifting.
	base = standard.replace_milli_of_day(temporal, millis)
	return standard.add_milliseconds(base, field.truncate(normalized) - normalized)
