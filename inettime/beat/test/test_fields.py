import datetime
from .. import fields as module
from .. import core
from .. import units
from .. import abstract
from ..types import InternetTime

utc = datetime.timezone.utc
pst = datetime.timezone(datetime.timedelta(hours=-8))

wrap_samples = [
	(-172800001, 86399999),
	(-172800000, 0),
	(-86400001, 86399999),
	(-86400000, 0),
	(-86399999, 1),
	(-1, 86399999),
	(0, 0),
	(1, 1),
	(86399999, 86399999),
	(86400000, 0),
	(172800000, 0),
	(172800001, 1),
]

def test_wrap_milli_of_day(test):
	for given, expected in wrap_samples:
		wrapped = module.wrap_milli_of_day(given)
		test/wrapped == expected
		test/module.wrap_milli_of_day(wrapped) == wrapped

def test_properties(test):
	test/module.BEAT_OF_DAY.range() == (0, 999)
	test/module.CENTIBEAT_OF_DAY.range() == (0, 99999)
	test/module.CENTIBEAT_OF_BEAT.range() == (0, 99)

	test/str(module.BEAT_OF_DAY) == 'BeatOfDay'
	test/str(module.CENTIBEAT_OF_DAY) == 'CentibeatOfDay'
	test/str(module.CENTIBEAT_OF_BEAT) == 'CentibeatOfBeat'

	test/module.BEAT_OF_DAY.unit % units.BEAT
	test/module.CENTIBEAT_OF_BEAT.range_unit % units.BEAT
	test/module.CENTIBEAT_OF_DAY.range_unit == 'day'

	for f in module.fields.values():
		test/f.date_based == False
		test/f.time_based == True
		test.isinstance(f, abstract.Field)

def test_select(test):
	test/module.select('beat') % module.BEAT_OF_DAY
	test/module.select('beat', 'day') % module.BEAT_OF_DAY
	test/module.select('centibeat') % module.CENTIBEAT_OF_DAY
	test/module.select('centibeat', 'beat') % module.CENTIBEAT_OF_BEAT
	test/module.select('hour', 'day') == None
	test/module.fields['CENTIBEAT_OF_BEAT'] % module.CENTIBEAT_OF_BEAT

def test_check(test):
	test/module.BEAT_OF_DAY.check(999) == 999
	test/module.BEAT_OF_DAY.is_valid(1000) == False

	with test/core.RangeError as exc:
		module.CENTIBEAT_OF_BEAT.check(100)
	test/exc().value == 100
	test/exc().field == 'CentibeatOfBeat'

	test/ValueError ^ (lambda: module.CENTIBEAT_OF_DAY.check(-1))

	# Integral values only.
	test/module.BEAT_OF_DAY.is_valid(5.5) == False
	test/module.BEAT_OF_DAY.is_valid(5.0) == False
	test/module.BEAT_OF_DAY.is_valid("5") == False
	test/core.RangeError ^ (lambda: module.BEAT_OF_DAY.check(5.5))
	test/core.RangeError ^ (lambda: module.CENTIBEAT_OF_BEAT.check(7.0))

def test_get_from_datetime(test):
	# Midnight in Biel is three in the afternoon of the prior day in San Francisco.
	dt = datetime.datetime(2025, 10, 11, 15, 0, tzinfo=pst)
	test/module.BEAT_OF_DAY.get_from(dt) == 0
	test/module.CENTIBEAT_OF_DAY.get_from(dt) == 0
	test/module.CENTIBEAT_OF_BEAT.get_from(dt) == 0

	noon = datetime.datetime(2025, 1, 1, 12, 0, tzinfo=utc)
	test/module.BEAT_OF_DAY.get_from(noon) == 541
	test/module.CENTIBEAT_OF_DAY.get_from(noon) == 54166
	test/module.CENTIBEAT_OF_BEAT.get_from(noon) == 66

def test_get_from_time(test):
	t = datetime.time(12, 0, tzinfo=utc)
	test/module.BEAT_OF_DAY.get_from(t) == 541
	test/module.CENTIBEAT_OF_BEAT.get_from(t) == 66

	# Wrap into the prior day.
	t = datetime.time(0, 30, tzinfo=datetime.timezone(datetime.timedelta(hours=14)))
	test/module.BEAT_OF_DAY.get_from(t) == 479

def test_field_composition(test):
	for hour in range(24):
		dt = datetime.datetime(2025, 6, 1, hour, 17, 3, 123000, tzinfo=pst)
		beat = module.BEAT_OF_DAY.get_from(dt)
		fraction = module.CENTIBEAT_OF_BEAT.get_from(dt)
		test/module.CENTIBEAT_OF_DAY.get_from(dt) == (beat * 100) + fraction

def test_get_from_internet_time(test):
	it = InternetTime.of((2025, 12, 31), 234, 56)
	test/module.BEAT_OF_DAY.get_from(it) == 234
	test/module.CENTIBEAT_OF_DAY.get_from(it) == 23456
	test/module.CENTIBEAT_OF_BEAT.get_from(it) == 56

def test_get_from_unsupported(test):
	for f in module.fields.values():
		test/core.UnsupportedTemporalType ^ (lambda: f.get_from(datetime.datetime(2025, 1, 1)))
		test/core.UnsupportedTemporalType ^ (lambda: f.get_from(datetime.date(2025, 1, 1)))
		test/core.UnsupportedTemporalType ^ (lambda: f.get_from(datetime.time(12, 0)))
		test/core.MissingArgument ^ (lambda: f.get_from(None))

def test_is_supported_by(test):
	f = module.BEAT_OF_DAY
	test/f.is_supported_by(None) == False
	test/f.is_supported_by(datetime.date(2025, 1, 1)) == False
	test/f.is_supported_by(datetime.datetime(2025, 1, 1)) == False
	test/f.is_supported_by(datetime.datetime(2025, 1, 1, tzinfo=utc)) == True
	test/f.is_supported_by(datetime.time(1, 0, tzinfo=utc)) == True
	test/f.is_supported_by(InternetTime.of((2025, 1, 1), 0)) == True

def test_range_refined_by(test):
	dt = datetime.datetime(2025, 1, 1, tzinfo=utc)
	test/module.BEAT_OF_DAY.range_refined_by(dt) == (0, 999)
	test/module.CENTIBEAT_OF_BEAT.range_refined_by(dt) == (0, 99)
	test/core.UnsupportedTemporalType ^ (
		lambda: module.BEAT_OF_DAY.range_refined_by(datetime.date(2025, 1, 1))
	)

def test_adjust_into_datetime(test):
	dt = datetime.datetime(2025, 10, 12, 0, 0, tzinfo=utc)
	test/module.BEAT_OF_DAY.adjust_into(dt, 500) == datetime.datetime(2025, 10, 12, 11, 0, tzinfo=utc)

	noon = datetime.datetime(2025, 1, 1, 12, 0, tzinfo=utc)
	aligned = module.CENTIBEAT_OF_BEAT.adjust_into(noon, 0)
	test/aligned == datetime.datetime(2025, 1, 1, 11, 59, 2, 400000, tzinfo=utc)
	test/module.BEAT_OF_DAY.get_from(aligned) == 541

	adjusted = module.CENTIBEAT_OF_DAY.adjust_into(noon, 12345)
	test/module.CENTIBEAT_OF_DAY.get_from(adjusted) == 12345
	test/adjusted.tzinfo % utc

def test_adjust_into_time(test):
	t = datetime.time(15, 0, tzinfo=pst)
	test/module.BEAT_OF_DAY.adjust_into(t, 500) == datetime.time(3, 0, tzinfo=pst)

def test_adjust_into_internet_time(test):
	it = InternetTime.of((2025, 12, 31), 234, 56)
	test/module.CENTIBEAT_OF_BEAT.adjust_into(it, 7) == InternetTime.of((2025, 12, 31), 234, 7)
	test/module.BEAT_OF_DAY.adjust_into(it, 1) == InternetTime.of((2025, 12, 31), 1, 0)
	test/module.CENTIBEAT_OF_DAY.adjust_into(it, 99999) == InternetTime.of((2025, 12, 31), 999, 99)

def test_adjust_into_invalid(test):
	dt = datetime.datetime(2025, 1, 1, tzinfo=utc)
	test/core.RangeError ^ (lambda: module.BEAT_OF_DAY.adjust_into(dt, 1000))
	test/core.RangeError ^ (lambda: module.CENTIBEAT_OF_BEAT.adjust_into(dt, -1))
	# Range is checked before support.
	test/core.RangeError ^ (lambda: module.BEAT_OF_DAY.adjust_into(datetime.date(2025, 1, 1), 1000))
	test/core.UnsupportedTemporalType ^ (
		lambda: module.BEAT_OF_DAY.adjust_into(datetime.date(2025, 1, 1), 1)
	)

def test_truncate(test):
	test/module.BEAT_OF_DAY.truncate(86399) == 0
	test/module.BEAT_OF_DAY.truncate(86400) == 86400
	test/module.CENTIBEAT_OF_DAY.truncate(1727) == 864
	test/module.CENTIBEAT_OF_BEAT.truncate(863) == 0

def test_pickle(test):
	import pickle
	for f in module.fields.values():
		test/pickle.loads(pickle.dumps(f)) % f

if __name__ == '__main__':
	import sys; from ...test import library as libtest
	libtest.execute(sys.modules[__name__])
