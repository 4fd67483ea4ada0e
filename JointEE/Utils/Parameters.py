"""
Parameter strings.

Feature builder options are given as strings of the form "maxDistance=2:relatedRoles".
A name without a value is a flag with the value True, and a comma separated value
becomes a list. A delimiter can be protected with a backslash, e.g. "timePrefix=T\\:".
"""

def split(string, delimiter=":", ignoreOpen="([{'\"", ignoreClose=")]}'\""):
    """
    Split a string at the delimiter, except inside brackets or quotes.
    """
    current = ""
    stack = ""
    for i in range(len(string)):
        c = string[i]
        if stack != "" and c in ignoreClose:
            if c in "'\"":
                if stack[-1] == c:
                    stack = stack[:-1]
                elif stack[-1] not in "'\"":
                    stack += c
            elif ignoreClose[ignoreOpen.index(stack[-1])] == c:
                stack = stack[:-1]
            else:
                raise Exception("Mismatched '" + stack[-1] + "' and '" + c + "' in parameter string '" + string + "' at position " + str(i))
        elif c in ignoreOpen:
            stack += c

        if c == delimiter and stack == "" and string[i-1:i] != "\\":
            yield current
            current = ""
        elif c == "\\" and string[i+1:i+2] == delimiter and stack == "":
            continue
        else:
            current += c
    if current != "":
        yield current

def toDict(parameters):
    """
    Convert a parameter string into a dictionary. Dictionaries are returned as they are.
    """
    if parameters == None or parameters == "":
        return {}
    if not isinstance(parameters, str):
        return parameters
    paramDict = {}
    for item in split(parameters, ":"):
        if item.strip() == "":
            continue
        value = True # a flag
        name = item
        if "=" in item:
            parts = list(split(item, "="))
            assert len(parts) == 2, parts
            name, value = parts
            value = list(split(value.strip(), ","))
            if len(value) == 1:
                value = value[0]
        paramDict[name.strip()] = value
    return paramDict

def toString(parameters, skipValues=[None]):
    """
    Convert a parameter dictionary into a string. Names whose value is in skipValues
    are left out, and True values are written as flags.
    """
    if parameters == None:
        return ""
    if isinstance(parameters, str):
        return parameters
    items = []
    for name in sorted(parameters.keys()):
        value = parameters[name]
        if isinstance(value, (list, tuple)):
            items.append(name + "=" + ",".join([str(x).replace(":", "\\:") for x in value]))
        elif value is True:
            items.append(name)
        elif value not in skipValues:
            items.append(name + "=" + str(value).replace(":", "\\:"))
    return ":".join(items)

def get(parameters, defaults=None, allowNew=False, valueLimits=None, valueTypes=None):
    """
    Parse a parameter string (or dictionary) and fill in the default values.

    @param defaults: a dictionary of the allowed names and their default values
    @param allowNew: if False, names not in defaults raise an exception
    @param valueLimits: a dictionary of name -> list of allowed values
    @param valueTypes: a dictionary of name -> list of cast functions. The value must be
    compatible with at least one of them. The values are not converted.
    """
    parameters = toDict(parameters)
    if defaults != None:
        for name in sorted(parameters.keys()):
            if name not in defaults and not allowNew:
                raise Exception("Undefined parameter: " + name + " (allowed parameters: " + ",".join(sorted(defaults.keys())) + ")")
        combined = dict(defaults)
        combined.update(parameters)
        parameters = combined
    for name in sorted(parameters.keys()):
        values = parameters[name]
        if not isinstance(values, (list, tuple)):
            values = [values]
        if valueLimits != None and name in valueLimits:
            for value in values:
                if value not in valueLimits[name]:
                    raise Exception("Illegal value '" + str(value) + "' for parameter " + name + " (allowed values: " + str(valueLimits[name]) + ")")
        if valueTypes != None and name in valueTypes:
            for value in values:
                if not _canCast(value, valueTypes[name]):
                    raise Exception("Value '" + str(value) + "' for parameter " + name + " cannot be cast to an allowed type (allowed types: " + str(valueTypes[name]) + ")")
    return parameters

def _canCast(value, castFunctions):
    for cast in castFunctions:
        try:
            cast(value)
            return True
        except (ValueError, TypeError):
            pass
    return False
