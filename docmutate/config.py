import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Bool, List, HasTraits, TraitError, validate
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .applying import OPERATOR_ORDER, ADDTOSET_STRATEGIES
from .update_format import UPDATE_OPS


class DocmutateConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """
    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            recursive_update(target.setdefault(k, {}), v)
        elif v is None:
            target.pop(k, None)
        else:
            target[k] = v


def build_config(entrypoint):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    for c in _load_config_files('docmutate_config', path=path):
        recursive_update(disk_config, c)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, DocmutateConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c))
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__])

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(DocmutateConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Rendering(DocmutateConfigurable):

    use_color = Bool(
        True,
        help="use ANSI color code escapes for text output.",
    ).tag(config=True)


class Apply(_Rendering):

    operators = List(
        Enum(UPDATE_OPS),
        default_value=list(OPERATOR_ORDER),
        help="The update operators to apply, in the order they are applied.",
    ).tag(config=True)

    @validate('operators')
    def _valid_operators(self, proposal):
        if len(set(proposal.value)) != len(proposal.value):
            raise TraitError("operators lists an operator more than once: %r" % (
                proposal.value,))
        return proposal.value

    addtoset_strategy = Enum(
        ADDTOSET_STRATEGIES,
        'union',
        help="How addToSet extends list fields: 'union' adds the given "
             "values that are not already present, 'self' only removes "
             "duplicates from the field's own values.",
    ).tag(config=True)


class Verify(_Rendering):

    default_permission = Enum(
        ('allow', 'deny'),
        'deny',
        help="Decision for fields without an entry in the permission tree.",
    ).tag(config=True)


class DocmutateApply(Global, Apply):
    pass

class DocmutateVerify(Global, Verify):
    pass

class DocmutateDemo(Global, Apply, Verify):
    pass


entrypoint_configurables = {
    'docmutate-apply': DocmutateApply,
    'docmutate-verify': DocmutateVerify,
    'docmutate-demo': DocmutateDemo,
}
