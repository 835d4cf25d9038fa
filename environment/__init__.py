"""Host feature detection: OS classification, runtime introspection and the feature probe"""
from .detection import OsClassification, OsFamily, classify_os
from .capabilities import HostRuntime, RuntimeIntrospector
from .context import FeatureProbe, ProbeCache, get_feature_probe

__all__ = [
    'OsClassification',
    'OsFamily',
    'classify_os',
    'HostRuntime',
    'RuntimeIntrospector',
    'FeatureProbe',
    'ProbeCache',
    'get_feature_probe'
]
