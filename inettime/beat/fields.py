"""
# Fields accessing the time of day in terms of Internet Time units.

# Field values require knowledge of the UTC offset, so local times and dates are not
# supported. The fields are primarily used to read Internet Time from standard types:

#!python
	from inettime.beat import fields
	beat = fields.BEAT_OF_DAY.get_from(datetime.datetime.now(datetime.timezone.utc))

# [ Elements ]

# /BEAT_OF_DAY/
	# The beat of the day; millidays elapsed since UTC+1 midnight. 0 - 999.
# /CENTIBEAT_OF_DAY/
	# The centibeats elapsed since UTC+1 midnight. 0 - 99,999.
# /CENTIBEAT_OF_BEAT/
	# The centibeats elapsed since the last beat boundary. 0 - 99.
"""
import operator

from . import core
from . import constants
from . import standard
from . import units

def wrap_milli_of_day(millis, period=constants.millis_per_day):
	"""
	# Wrap a millisecond offset of any distance from the day into `[0, millis_per_day)`.
	"""
	return millis % period

def normalize(millis, offset_seconds, reference=constants.reference_offset_millis):
	"""
	# Re-express the local millisecond of the day at &offset_seconds as the
	# millisecond of the day at the reference offset.
	"""
	return wrap_milli_of_day(millis - (offset_seconds * 1000) + reference)

def localize(millis, offset_seconds, reference=constants.reference_offset_millis):
	"""
	# Inverse of &normalize.
	"""
	return wrap_milli_of_day(millis - reference + (offset_seconds * 1000))

class Field(object):
	"""
	# A range bounded count of Internet Time units within a day.

	# [ Properties ]
	# /name/
		# The display name of the field.
	# /unit/
		# The &units.Unit the field counts.
	# /range_unit/
		# The unit bounding the field; `'day'` or a &units.Unit.
	# /minimum/
		# The inclusive lower bound.
	# /maximum/
		# The inclusive upper bound.
	"""
	__slots__ = ('name', 'part', 'of', 'unit', 'range_unit', 'minimum', 'maximum')

	def __init__(self, name, unit, range_unit, maximum):
		self.name = name
		self.unit = unit
		self.range_unit = range_unit
		self.part = unit.unit
		self.of = getattr(range_unit, 'unit', range_unit)
		self.minimum = 0
		self.maximum = maximum

	def __repr__(self):
		return "%s.%s" %(self.__class__.__module__, self.identifier)

	def __str__(self):
		return self.name

	def __reduce__(self):
		return (select, (self.part, self.of))

	@property
	def identifier(self):
		return '_'.join((self.part, 'of', self.of)).upper()

	@property
	def date_based(self):
		return self.unit.date_based

	@property
	def time_based(self):
		return self.unit.time_based

	def range(self):
		"""
		# The inclusive `(minimum, maximum)` pair of the field. Does not vary.
		"""
		return (self.minimum, self.maximum)

	def is_valid(self, value) -> bool:
		try:
			value = operator.index(value)
		except TypeError:
			# Not integral.
			return False
		return self.minimum <= value <= self.maximum

	def check(self, value) -> int:
		"""
		# Validate &value against &range returning it as an &int.
		# Values that are not integers, `5.5` or `5.0`, are rejected.
		"""
		if not self.is_valid(value):
			raise core.RangeError(self.name, value, self.minimum, self.maximum)
		return operator.index(value)

	def is_supported_by(self, temporal) -> bool:
		if temporal is None:
			return False

		from .types import InternetTime
		if isinstance(temporal, InternetTime):
			return True

		return (
			standard.milli_of_day(temporal) is not None and
			standard.offset_seconds(temporal) is not None
		)

	def _require(self, temporal):
		if temporal is None:
			raise core.MissingArgument('temporal')
		if not self.is_supported_by(temporal):
			raise core.UnsupportedTemporalType(
				"%s not supported by %s: %r" %(self.name, temporal.__class__.__name__, temporal)
			)

	def range_refined_by(self, temporal):
		self._require(temporal)
		return self.range()

	def truncate(self, millis) -> int:
		"""
		# Align &millis to the beginning of the field's unit.
		"""
		return self.unit.to_millis(self.unit.from_millis(millis))

	def get_from(self, temporal) -> int:
		"""
		# Read the field from &temporal.

		# &.types.InternetTime instances are read directly. Other temporals have
		# their millisecond of day normalized to the reference offset.
		"""
		self._require(temporal)

		from .types import InternetTime
		if isinstance(temporal, InternetTime):
			return temporal.select(self)

		return self.unit.from_millis(normalized_milli_of_day(temporal))

	def adjust_into(self, temporal, value):
		"""
		# Construct a new instance of &temporal with the field set to &value.
		"""
		value = self.check(value)
		self._require(temporal)

		from .types import InternetTime
		if isinstance(temporal, InternetTime):
			return temporal.update(self, value)

		offset = standard.offset_seconds(temporal)
		millis = localize(self._replacement_millis(temporal, value), offset)
		return standard.replace_milli_of_day(temporal, millis)

	def _replacement_millis(self, temporal, value):
		return self.unit.to_millis(value)

class FractionalField(Field):
	"""
	# A field counting the units after the last boundary of its &range_unit.
	"""
	__slots__ = ()

	def get_from(self, temporal) -> int:
		self._require(temporal)

		from .types import InternetTime
		if isinstance(temporal, InternetTime):
			return temporal.select(self)

		return CENTIBEAT_OF_DAY.get_from(temporal) % constants.centibeats_per_beat

	def _replacement_millis(self, temporal, value):
		centibeats = CENTIBEAT_OF_DAY.get_from(temporal)
		centibeats += value - (centibeats % constants.centibeats_per_beat)
		return self.unit.to_millis(centibeats)

def normalized_milli_of_day(temporal) -> int:
	"""
	# The millisecond of the day of &temporal at the reference offset.
	"""
	millis = standard.milli_of_day(temporal)
	offset = standard.offset_seconds(temporal)
	if millis is None or offset is None:
		raise core.UnsupportedTemporalType(
			"millisecond of day and offset required: " + temporal.__class__.__name__
		)
	return normalize(millis, offset)

BEAT_OF_DAY = Field('BeatOfDay', units.BEAT, 'day', 999)
CENTIBEAT_OF_DAY = Field('CentibeatOfDay', units.CENTIBEAT, 'day', 99999)
CENTIBEAT_OF_BEAT = FractionalField('CentibeatOfBeat', units.CENTIBEAT, units.BEAT, 99)

fields = {
	x.identifier: x
	for x in (BEAT_OF_DAY, CENTIBEAT_OF_DAY, CENTIBEAT_OF_BEAT)
}

index = {
	(x.part, x.of): x
	for x in fields.values()
}

def select(part, of=None):
	"""
	# Retrieve the &Field counting &part of &of; &None if the pair does not
	# identify an Internet Time field. &of defaults to `'day'`.
	"""
	return index.get((part, of or 'day'))
