"""
# Protocols for Internet Time units, fields, and points.

# Primarily, this module exists to document the interfaces that &.types.InternetTime
# dispatches to when given a unit or field that is not one of its own.
# The redundant method declarations are intentional.
"""
from abc import abstractmethod
import typing

@typing.runtime_checkable
class Unit(typing.Protocol):
	"""
	# A duration that can be added to temporals and measured between them.
	"""

	@property
	@abstractmethod
	def estimated(self) -> bool:
		"""
		# Whether the duration of the unit varies; calendar months, for instance.
		"""

	@property
	@abstractmethod
	def time_based(self) -> bool:
		"""
		# Whether the unit is a division of the day.
		"""

	@property
	@abstractmethod
	def date_based(self) -> bool:
		"""
		# Whether the unit is a day or a multiple of a day.
		"""

	@abstractmethod
	def is_supported_by(self, temporal) -> bool:
		"""
		# Whether the unit can be added to &temporal.
		"""

	@abstractmethod
	def add_to(self, temporal, count:int):
		"""
		# Construct a new temporal of the same type that is &count units later.
		"""

	@abstractmethod
	def between(self, start, stop) -> int:
		"""
		# The signed number of complete units from &start to &stop.
		"""

@typing.runtime_checkable
class Field(typing.Protocol):
	"""
	# A bounded component of a temporal.
	"""

	@abstractmethod
	def range(self) -> typing.Tuple[int, int]:
		"""
		# The inclusive `(minimum, maximum)` pair of the field.
		"""

	@abstractmethod
	def range_refined_by(self, temporal) -> typing.Tuple[int, int]:
		"""
		# The inclusive range of the field as it applies to &temporal.
		"""

	@abstractmethod
	def is_supported_by(self, temporal) -> bool:
		"""
		# Whether the field can be read from &temporal.
		"""

	@abstractmethod
	def get_from(self, temporal) -> int:
		"""
		# Read the field from &temporal.
		"""

	@abstractmethod
	def adjust_into(self, temporal, value:int):
		"""
		# Construct a new temporal of the same type with the field set to &value.
		"""

@typing.runtime_checkable
class Point(typing.Protocol):
	"""
	# A point in time that can be read and adjusted by fields and units.
	"""

	@abstractmethod
	def is_supported(self, subject, of=None) -> bool:
		"""
		# Whether the field or unit, &subject, is supported by the point.
		"""

	@abstractmethod
	def select(self, part, of=None) -> int:
		"""
		# Extract the value of the field.
		"""

	@abstractmethod
	def update(self, part, replacement:int, of=None) -> 'Point':
		"""
		# Construct a new point with the field set to &replacement.
		"""

	@abstractmethod
	def plus(self, amount:int, unit) -> 'Point':
		"""
		# Construct a new point &amount &unit later.
		"""

	@abstractmethod
	def until(self, end, unit) -> int:
		"""
		# The number of complete &unit between the point and &end.
		"""

	@abstractmethod
	def leads(self, pit) -> bool:
		"""
		# Whether the point comes before &pit.
		"""

	@abstractmethod
	def follows(self, pit) -> bool:
		"""
		# Whether the point comes after &pit.
		"""
