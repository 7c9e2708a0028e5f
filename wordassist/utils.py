
def splice(s, i, c):
    """
    replace letter in string at position i
    aka: s[i] = c
    """
    return s[:i] + c + s[i + 1:]

def is_blank(c):
    """
    a board cell nobody typed into yet
    """
    return c is None or c.strip() in ('', '.')

class dotdict(dict):
    """
    dot.notation access to click options, missing keys read as None
    so optional arguments can be tested with a plain `if`
    """
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__
