"""
IPython integration.

    %load_ext openstruct.notebook

puts `OpenStruct` in the user namespace and registers the `%record` line
magic, which evaluates its argument in the user namespace and wraps the
resulting mapping in a record:

    %record {"name": "Rowdy", "owner": "John Smith"}
"""

from IPython.core.magic import no_var_expand

from .record import OpenStruct


def record_magic_factory(ipython):
    @no_var_expand
    def record(line):
        """
        Build an OpenStruct from a mapping expression.
        Usage:
          %record <expression>
        """
        source = line.strip()
        if not source:
            return OpenStruct()

        return OpenStruct(ipython.ev(source))

    return record


def load_ipython_extension(ipython):
    ipython.user_ns["OpenStruct"] = OpenStruct
    ipython.register_magic_function(
        record_magic_factory(ipython), magic_kind="line", magic_name="record"
    )


def unload_ipython_extension(ipython):
    if ipython.user_ns.get("OpenStruct") is OpenStruct:
        del ipython.user_ns["OpenStruct"]
