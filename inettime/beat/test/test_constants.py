"""
# Sanity checks regarding the reference offset and unit lengths.
"""
import datetime
from .. import constants as module
from .. import project

def test_reference_offset(test):
	test/module.ZONE.utcoffset(None) == datetime.timedelta(hours=1)
	test/module.ZONE.tzname(None) == 'BMT'
	test/module.reference_offset_millis == 3600000

def test_divisions(test):
	test/module.millis_per_day == 86400000
	test/module.max_milli_of_day == 86399999
	test/(module.millis_per_beat * 1000) == module.millis_per_day
	test/module.millis_per_centibeat == 864
	test/module.centibeats_per_beat == 100

def test_datums(test):
	test/module.epoch_date == datetime.date(1970, 1, 1)
	test/module.unix_epoch.timestamp() == 0

def test_project(test):
	test/project.version == '.'.join(map(str, project.version_info))

if __name__ == '__main__':
	import sys; from ...test import library as libtest
	libtest.execute(sys.modules[__name__])
