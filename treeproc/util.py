from os import path
import json
import logging


log = logging.getLogger(__name__)

DEFAULTS = {
    'strict': False,
    'id_separator': '_',
    'skip_terminals': True,
    'trees': '',
}


class Config(object):
    def __init__(self, **kwargs):
        for key, value in DEFAULTS.items():
            setattr(self, key, value)
        for key, value in kwargs.items():
            setattr(self, key, value)

    @classmethod
    def write(cls, loc, **kwargs):
        with open(loc, 'w') as out_file:
            out_file.write(json.dumps(kwargs))

    @classmethod
    def read(cls, loc):
        if not loc or not path.exists(loc):
            log.warning("No config file at %s, using defaults", loc)
            return cls()
        with open(loc) as cfg_file:
            return cls(**json.load(cfg_file))
