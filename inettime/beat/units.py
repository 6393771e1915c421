"""
# Time units distinct to Internet Time.

# [ Elements ]

# /BEAT/
	# One thousandth of a nominal day; 86.4 seconds. Usually notated
	# as a zero padded value with a leading `@`: `@012`.
# /CENTIBEAT/
	# One hundredth of a beat; 864 milliseconds. Notated as `@012.34`.
# /units/
	# Mapping of unit identifiers to the &Unit instances.
"""
import datetime

from . import core
from . import constants
from . import standard

class Unit(object):
	"""
	# An exact, time based, duration that evenly divides a day.

	# [ Properties ]
	# /unit/
		# Identifier of the unit.
	# /name/
		# Display name of the unit.
	# /millis/
		# The exact length of the unit in milliseconds.
	"""
	__slots__ = ('unit', 'name', 'millis')

	estimated = False
	date_based = False
	time_based = True

	def __init__(self, unit:str, name:str, millis:int):
		self.unit = unit
		self.name = name
		self.millis = millis

	def __repr__(self):
		return self.__class__.__module__ + '.' + self.unit.upper()

	def __str__(self):
		return self.name

	def __reduce__(self):
		return (select, (self.unit,))

	@property
	def duration(self) -> datetime.timedelta:
		return datetime.timedelta(milliseconds=self.millis)

	def to_millis(self, count:int, long_min=constants.long_min, long_max=constants.long_max) -> int:
		"""
		# Convert a count of units into milliseconds.
		# Raises &core.Overflow when the product leaves the signed 64-bit range.
		"""
		ms = count * self.millis
		if ms > long_max or ms < long_min:
			raise core.Overflow("%d %s exceeds the millisecond range" %(count, self.name))
		return ms

	def from_millis(self, millis:int) -> int:
		"""
		# The number of whole units in &millis; floor division so that negative
		# milliseconds select the unit that is less than or equal.
		"""
		return millis // self.millis

	def is_supported_by(self, temporal) -> bool:
		return temporal is not None and standard.supports_milliseconds(temporal)

	def check(self, temporal):
		if temporal is None:
			raise core.MissingArgument('temporal')
		if not standard.supports_milliseconds(temporal):
			raise core.UnsupportedTemporalType(
				temporal.__class__.__name__ + " does not support " + self.name
			)

	def add_to(self, temporal, count:int):
		"""
		# Construct a new temporal of the same type &count units later.
		"""
		self.check(temporal)
		return standard.add_milliseconds(temporal, self.to_millis(count))

	def between(self, start, stop) -> int:
		"""
		# The signed number of units from &start, inclusive, to &stop, exclusive.
		"""
		self.check(start)
		self.check(stop)
		return self.from_millis(standard.milliseconds_between(start, stop))

BEAT = Unit('beat', 'Beats', constants.millis_per_beat)
CENTIBEAT = Unit('centibeat', 'Centibeats', constants.millis_per_centibeat)

units = {
	BEAT.unit: BEAT,
	CENTIBEAT.unit: CENTIBEAT,
}

def select(identifier:str) -> Unit:
	"""
	# Retrieve the &Unit by its identifier; &None if it is not an Internet Time unit.
	"""
	return units.get(identifier)
