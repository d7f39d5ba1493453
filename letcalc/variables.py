from letcalc.exceptions import UndefinedVariable


class Variable:
    __slots__ = ['name', 'value']

    def __init__(self, name, value):
        self.name = name
        self.value = value

    def __repr__(self):
        return "<Variable({}={})>".format(self.name, self.value)


class VariableTable:
    """
    Variables defined during a session, in order of first declaration.

    Names are case sensitive and unique. The table lives for the whole
    session and is passed explicitly to every evaluation.
    """
    def __init__(self):
        self.variables = []

    def _get_variable(self, name):
        for var in self.variables:
            if var.name == name:
                return var
        return None

    def get(self, name):
        """
        Returns the value of the variable `name`.

        Raises UndefinedVariable if the name was never defined.
        """
        var = self._get_variable(name)
        if var is None:
            raise UndefinedVariable(name)
        return var.value

    def define(self, name, value):
        """
        Binds `name` to `value`, overwriting an existing binding in place.
        Returns `value`.
        """
        var = self._get_variable(name)
        if var is None:
            self.variables.append(Variable(name, value))
        else:
            var.value = value
        return value

    def names(self):
        return [var.name for var in self.variables]

    def items(self):
        return [(var.name, var.value) for var in self.variables]

    def __contains__(self, name):
        return self._get_variable(name) is not None

    def __len__(self):
        return len(self.variables)

    def __iter__(self):
        return iter(self.variables)

    def __repr__(self):
        return "<VariableTable({})>".format(
            ", ".join(f"{name}={value}" for name, value in self.items()))
