#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# Runtime type introspection and member resolution

# Base types
from .Obj import Obj
from .Enum import Enum

# Type model
from .TypeKind import TypeKind
from .Type import Type, ArrayType, ParameterizedType, TypeVar, BoundedType
from .SlotKind import SlotKind
from .Slot import Slot, FConst
from .Field import Field
from .Method import Method
from .Ctor import Ctor
from .Param import Param

# Compatibility and resolution
from .BasicType import BasicType
from .TypeUtil import TypeUtil
from .GenericUtil import GenericUtil

# Members and invocation
from .SlotCache import SlotCache
from .Reflector import Reflector
from .Invoker import Invoker

# Environment
from .Env import Env
from .Log import Log, LogLevel, LogRec

# Errors
from .Err import (
    Err, ParseErr, ArgErr, UnknownTypeErr, UnknownSlotErr,
    InvalidHierarchyErr, NoSuchMemberErr, InvocationErr,
)
