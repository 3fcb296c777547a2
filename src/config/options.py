"""
选项解析器

根据配置中声明的 options 模式校验调用方传入的选项，支持：
- default  缺省值
- required 必填
- allowed  允许值集合
- type     值类型 (string/int/float/bool/list/dict)
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .errors import OptionValidationError

_MISSING = object()

TYPE_CHECKS = {
    'string': lambda v: isinstance(v, str),
    'int': lambda v: isinstance(v, int) and not isinstance(v, bool),
    'float': lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
    'bool': lambda v: isinstance(v, bool),
    'list': lambda v: isinstance(v, list),
    'dict': lambda v: isinstance(v, dict),
}

CONSTRAINT_KEYS = {'required', 'default', 'allowed', 'type'}


@dataclass
class OptionSpec:
    """单个选项的约束"""
    name: str
    required: bool = False
    default: Any = _MISSING
    allowed: Optional[List[Any]] = None
    type: Optional[str] = None

    @property
    def has_default(self) -> bool:
        return self.default is not _MISSING

    @classmethod
    def from_constraints(cls, name: str, constraints: Optional[Dict[str, Any]]) -> "OptionSpec":
        """从模式中的约束字典构建"""
        if constraints is None:
            return cls(name=name)
        if not isinstance(constraints, dict):
            raise OptionValidationError(f"选项 {name} 的约束必须是字典", option=name)

        unknown = set(constraints) - CONSTRAINT_KEYS
        if unknown:
            raise OptionValidationError(
                f"选项 {name} 包含未知约束: {', '.join(sorted(unknown))}", option=name)

        option_type = constraints.get('type')
        if option_type is not None and option_type not in TYPE_CHECKS:
            raise OptionValidationError(f"选项 {name} 的类型未知: {option_type}", option=name)

        required = constraints.get('required', False)
        if not isinstance(required, bool):
            raise OptionValidationError(f"选项 {name} 的 required 必须是布尔值", option=name)

        allowed = constraints.get('allowed')
        if allowed is not None and not isinstance(allowed, list):
            raise OptionValidationError(f"选项 {name} 的 allowed 必须是列表", option=name)

        return cls(
            name=name,
            required=required,
            default=constraints.get('default', _MISSING),
            allowed=allowed,
            type=option_type
        )

    def check(self, value: Any) -> None:
        """校验传入值"""
        if self.type is not None and not TYPE_CHECKS[self.type](value):
            raise OptionValidationError(
                f"选项 {self.name} 类型错误: 期望 {self.type}, 实际 {type(value).__name__}",
                option=self.name)
        if self.allowed is not None and value not in self.allowed:
            raise OptionValidationError(
                f"选项 {self.name} 的值 {value!r} 不在允许范围 {self.allowed!r} 内",
                option=self.name)


class OptionsResolver:
    """基于模式的选项解析器"""

    def __init__(self, schema: Union[Dict[str, Any], List[str]]):
        """
        初始化选项解析器

        Args:
            schema: {选项名: 约束字典} 或选项名列表（均无约束）
        """
        self.specs: Dict[str, OptionSpec] = {}
        self.values: Dict[str, Any] = {}

        if isinstance(schema, dict):
            for name, constraints in schema.items():
                self.specs[str(name)] = OptionSpec.from_constraints(str(name), constraints)
        elif isinstance(schema, list):
            for name in schema:
                self.specs[str(name)] = OptionSpec(name=str(name))
        else:
            raise OptionValidationError("options 模式必须是字典或列表")

    def add_option(self, name: str, value: Any) -> None:
        """添加调用方传入的选项"""
        if name not in self.specs:
            raise OptionValidationError(f"未知选项: {name}", option=name)
        self.values[name] = value

    def get_options(self) -> Dict[str, Any]:
        """校验并返回最终选项（按模式声明顺序）"""
        resolved: Dict[str, Any] = {}

        for name, spec in self.specs.items():
            if name in self.values:
                value = self.values[name]
                spec.check(value)
                resolved[name] = value
            elif spec.has_default:
                resolved[name] = spec.default
            elif spec.required:
                raise OptionValidationError(f"缺少必填选项: {name}", option=name)

        return resolved
