import pytest
from pydantic import ValidationError

from sel4_xml_gen.parser.base import (
    Api,
    DocRef,
    ErrorEnumDesc,
    Interface,
    Leaf,
    Leaves,
    Method,
    Param,
    PCData,
    StructElem,
    Syscall,
    SyscallConfig,
    TextTT,
)


class TestMethod:
    def test_create_minimal_method(self):
        m = Method(name="Suspend", id="TCBSuspend")
        assert m.condition is None
        assert m.manual_name is None
        assert m.brief == []
        assert m.cap_param is None
        assert m.params == []
        assert m.errors == []

    def test_method_is_frozen(self):
        m = Method(name="Suspend", id="TCBSuspend")
        with pytest.raises(ValidationError):
            m.id = "Other"

    def test_equal_methods_compare_equal(self):
        a = Method(name="Send", id="3", params=[Param(type="int", name="n", dir="in")])
        b = Method(name="Send", id="3", params=[Param(type="int", name="n", dir="in")])
        assert a == b


class TestApi:
    def test_interfaces_skips_structs(self):
        api = Api(children=[
            StructElem(name="seL4_UserContext", members=["pc"]),
            Interface(name="seL4_TCB", methods=[Method(name="Suspend", id="TCBSuspend")]),
        ])
        assert [i.name for i in api.interfaces] == ["seL4_TCB"]

    def test_dump_tags_variants(self):
        method = Method(
            name="Retype",
            id="UntypedRetype",
            description=[Leaf(leaf=TextTT(text="x")), DocRef(leaves=[PCData(text="y")])],
            return_value=[ErrorEnumDesc(), Leaves(leaf=Leaf(leaf=PCData(text="z")))],
        )
        data = method.model_dump(mode="json")
        assert data["description"][0] == {"kind": "leaf", "leaf": {"kind": "texttt", "text": "x"}}
        assert data["description"][1]["kind"] == "docref"
        assert data["return_value"][0] == {"kind": "errorenumdesc"}

    def test_validate_from_dump(self):
        api = Api(
            name="ObjectApi",
            children=[Interface(name="seL4_TCB", methods=[Method(name="Suspend", id="TCBSuspend")])],
        )
        api2 = Api.model_validate(api.model_dump())
        assert api2 == api
        assert isinstance(api2.children[0], Interface)


class TestSyscallConfig:
    def test_condition_defaults_to_none(self):
        config = SyscallConfig(syscalls=[Syscall(name="Call")])
        assert config.condition is None
        assert config.syscalls[0].name == "Call"
