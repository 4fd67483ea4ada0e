"""
Base class for FeatureBuilders
"""
import JointEE.Utils.Parameters as Parameters

def sortedPair(label1, label2):
    """
    Two labels in alphabetical order, joined with "#". The result doesn't depend on the
    order of the arguments.
    """
    return "#".join(sorted([label1, label2]))

def boolString(value):
    if value:
        return "true"
    else:
        return "false"

class FeatureBuilder:
    """
    Multiple example builders might make use of the same features. A feature builder object can be used in
    different example builders that require the same feature set.
    """
    def __init__(self, style=None, defaults=None, valueTypes=None):
        """
        @type style: str or dictionary
        @param style: a parameter string, e.g. "maxDistance=3:relatedRoles"
        @type defaults: dictionary
        @param defaults: the allowed style parameters and their default values
        """
        self.features = None # current feature list
        self.tag = "" # a prefix that is added to each feature name
        if defaults == None:
            defaults = {}
        self.style = Parameters.get(style, defaults=defaults, valueTypes=valueTypes)

    def setTag(self, tag=""):
        self.tag = tag

    def setFeatureVector(self, features=None):
        """
        When the feature builder builds features, they are appended to this list.

        @type features: list
        @param features: a reference to the feature list
        """
        self.features = features
        self.tag = ""

    def setFeature(self, name):
        """
        Add a feature to the current feature list. Features are indicators, so repeated
        names are kept as they are. All features are prefixed with FeatureBuilder.tag.

        @type name: str
        """
        self.features.append(self.tag + name)
