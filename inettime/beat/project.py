identity = 'http://fault.io/project/python/inettime.beat'
name = 'inettime'
abstract = 'Internet Time points with beat and centibeat precision.'
icon = '@'
study = 'horology'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
