"""
SchemaComparator implementation.
"""

import logging
from typing import Any, Optional

from graphql import (
    DEFAULT_DEPRECATION_REASON,
    GraphQLArgument,
    GraphQLDirective,
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputObjectType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLUnionType,
    ast_from_value,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_introspection_type,
    is_object_type,
    is_scalar_type,
    is_specified_directive,
    is_specified_scalar_type,
    is_union_type,
    print_ast,
)
from graphql.pyutils import Undefined

from .types import ChangeRecord, ChangeType

logger = logging.getLogger(__name__)


class SchemaComparator:
    """
    GraphQL schema comparator.

    Walks two built schemas and reports every difference as a
    :class:`ChangeRecord`. Introspection types, specified scalars and
    specified directives are left out since every schema carries them.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def compare(self, old_schema: GraphQLSchema, new_schema: GraphQLSchema) -> list[ChangeRecord]:
        """Compare two schemas and return the raw list of changes."""
        changes: list[ChangeRecord] = []
        self._compare_root_types(old_schema, new_schema, changes)
        self._compare_types(old_schema, new_schema, changes)
        self._compare_directives(old_schema, new_schema, changes)
        self.logger.info(f"Schema comparison completed: {len(changes)} changes found")
        return changes

    # Schema roots

    def _compare_root_types(self, old_s: GraphQLSchema, new_s: GraphQLSchema, changes: list[ChangeRecord]):
        roots = (
            ("query", ChangeType.SCHEMA_QUERY_TYPE_CHANGED, old_s.query_type, new_s.query_type),
            ("mutation", ChangeType.SCHEMA_MUTATION_TYPE_CHANGED, old_s.mutation_type, new_s.mutation_type),
            ("subscription", ChangeType.SCHEMA_SUBSCRIPTION_TYPE_CHANGED, old_s.subscription_type, new_s.subscription_type),
        )
        for label, change_type, old_root, new_root in roots:
            old_name = old_root.name if old_root else None
            new_name = new_root.name if new_root else None
            if old_name != new_name:
                changes.append(ChangeRecord(change_type, "", f"Schema {label} root has changed from '{old_name or 'unknown'}' to '{new_name or 'unknown'}'"))

    # Types

    def _compare_types(self, old_s: GraphQLSchema, new_s: GraphQLSchema, changes: list[ChangeRecord]):
        old_t = {name: t for name, t in old_s.type_map.items() if _is_comparable_type(t)}
        new_t = {name: t for name, t in new_s.type_map.items() if _is_comparable_type(t)}
        for name in new_t:
            if name not in old_t:
                changes.append(ChangeRecord(ChangeType.TYPE_ADDED, name, f"Type '{name}' was added"))
        for name in old_t:
            if name not in new_t:
                changes.append(ChangeRecord(ChangeType.TYPE_REMOVED, name, f"Type '{name}' was removed"))
        for name in old_t:
            if name in new_t:
                self._compare_type_details(old_t[name], new_t[name], changes)

    def _compare_type_details(self, old_type: GraphQLNamedType, new_type: GraphQLNamedType, changes: list[ChangeRecord]):
        name = old_type.name
        old_kind, new_kind = _kind_of(old_type), _kind_of(new_type)
        if old_kind != new_kind:
            changes.append(ChangeRecord(ChangeType.TYPE_KIND_CHANGED, name, f"'{name}' kind changed from '{old_kind}' to '{new_kind}'"))
            return
        self._compare_descriptions(
            name, old_type.description, new_type.description, changes,
            added=ChangeType.TYPE_DESCRIPTION_ADDED, removed=ChangeType.TYPE_DESCRIPTION_REMOVED,
            changed=ChangeType.TYPE_DESCRIPTION_CHANGED, subject=f"type '{name}'",
        )
        if old_kind in ('OBJECT', 'INTERFACE'): self._compare_fields(old_type, new_type, changes)
        elif old_kind == 'ENUM': self._compare_enum_values(old_type, new_type, changes)
        elif old_kind == 'INPUT_OBJECT': self._compare_input_fields(old_type, new_type, changes)
        elif old_kind == 'UNION': self._compare_union_members(old_type, new_type, changes)
        if old_kind == 'OBJECT': self._compare_interfaces(old_type, new_type, changes)

    # Fields

    def _compare_fields(self, old_type: GraphQLObjectType, new_type: GraphQLObjectType, changes: list[ChangeRecord]):
        owner = f"{_kind_label(old_type)} '{old_type.name}'"
        old_f, new_f = old_type.fields, new_type.fields
        for n in new_f:
            if n not in old_f:
                changes.append(ChangeRecord(ChangeType.FIELD_ADDED, f"{old_type.name}.{n}", f"Field '{n}' was added to {owner}"))
        for n in old_f:
            if n not in new_f:
                changes.append(ChangeRecord(ChangeType.FIELD_REMOVED, f"{old_type.name}.{n}", f"Field '{n}' was removed from {owner}"))
        for n in old_f:
            if n in new_f:
                self._compare_field_details(old_type.name, n, old_f[n], new_f[n], changes)

    def _compare_field_details(self, type_name: str, field_name: str, old_f: GraphQLField, new_f: GraphQLField, changes: list[ChangeRecord]):
        path = f"{type_name}.{field_name}"
        if str(old_f.type) != str(new_f.type):
            changes.append(ChangeRecord(ChangeType.FIELD_TYPE_CHANGED, path, f"Field '{path}' changed type from '{old_f.type}' to '{new_f.type}'"))
        self._compare_descriptions(
            path, old_f.description, new_f.description, changes,
            added=ChangeType.FIELD_DESCRIPTION_ADDED, removed=ChangeType.FIELD_DESCRIPTION_REMOVED,
            changed=ChangeType.FIELD_DESCRIPTION_CHANGED, subject=f"field '{path}'",
        )
        self._compare_field_deprecation(path, old_f.deprecation_reason, new_f.deprecation_reason, changes)
        self._compare_arguments(path, old_f.args, new_f.args, changes)

    def _compare_field_deprecation(self, path: str, old_reason: Optional[str], new_reason: Optional[str], changes: list[ChangeRecord]):
        if old_reason is None and new_reason is not None:
            changes.append(ChangeRecord(ChangeType.FIELD_DEPRECATION_ADDED, path, f"Field '{path}' is deprecated"))
            if new_reason != DEFAULT_DEPRECATION_REASON:
                changes.append(ChangeRecord(ChangeType.FIELD_DEPRECATION_REASON_ADDED, path, f"Field '{path}' has deprecation reason '{new_reason}'"))
        elif old_reason is not None and new_reason is None:
            changes.append(ChangeRecord(ChangeType.FIELD_DEPRECATION_REMOVED, path, f"Field '{path}' is no longer deprecated"))
            if old_reason != DEFAULT_DEPRECATION_REASON:
                changes.append(ChangeRecord(ChangeType.FIELD_DEPRECATION_REASON_REMOVED, path, f"Deprecation reason was removed from field '{path}'"))
        elif old_reason != new_reason:
            changes.append(ChangeRecord(ChangeType.FIELD_DEPRECATION_REASON_CHANGED, path, f"Deprecation reason on field '{path}' has changed from '{old_reason}' to '{new_reason}'"))

    def _compare_arguments(self, path: str, old_args: dict[str, GraphQLArgument], new_args: dict[str, GraphQLArgument], changes: list[ChangeRecord]):
        for n in new_args:
            if n not in old_args:
                changes.append(ChangeRecord(ChangeType.FIELD_ARGUMENT_ADDED, f"{path}.{n}", f"Argument '{n}: {new_args[n].type}' added to field '{path}'"))
        for n in old_args:
            if n not in new_args:
                changes.append(ChangeRecord(ChangeType.FIELD_ARGUMENT_REMOVED, f"{path}.{n}", f"Argument '{n}: {old_args[n].type}' was removed from field '{path}'"))
        for n in old_args:
            if n not in new_args:
                continue
            old_a, new_a, arg_path = old_args[n], new_args[n], f"{path}.{n}"
            if str(old_a.type) != str(new_a.type):
                changes.append(ChangeRecord(ChangeType.FIELD_ARGUMENT_TYPE_CHANGED, arg_path, f"Type for argument '{n}' on field '{path}' changed from '{old_a.type}' to '{new_a.type}'"))
            old_default, new_default = _print_default(old_a), _print_default(new_a)
            if old_default != new_default:
                changes.append(ChangeRecord(ChangeType.FIELD_ARGUMENT_DEFAULT_CHANGED, arg_path, _default_message(f"argument '{n}' on field '{path}'", old_default, new_default)))
            if (old_a.description or "") != (new_a.description or ""):
                changes.append(ChangeRecord(ChangeType.FIELD_ARGUMENT_DESCRIPTION_CHANGED, arg_path, f"Description for argument '{n}' on field '{path}' changed from '{old_a.description or ''}' to '{new_a.description or ''}'"))

    # Enums

    def _compare_enum_values(self, old_t: GraphQLEnumType, new_t: GraphQLEnumType, changes: list[ChangeRecord]):
        old_v, new_v = old_t.values, new_t.values
        for n in new_v:
            if n not in old_v:
                changes.append(ChangeRecord(ChangeType.ENUM_VALUE_ADDED, f"{old_t.name}.{n}", f"Enum value '{n}' was added to enum '{old_t.name}'"))
        for n in old_v:
            if n not in new_v:
                changes.append(ChangeRecord(ChangeType.ENUM_VALUE_REMOVED, f"{old_t.name}.{n}", f"Enum value '{n}' was removed from enum '{old_t.name}'"))
        for n in old_v:
            if n not in new_v:
                continue
            path = f"{old_t.name}.{n}"
            old_value, new_value = old_v[n], new_v[n]
            if (old_value.description or "") != (new_value.description or ""):
                changes.append(ChangeRecord(ChangeType.ENUM_VALUE_DESCRIPTION_CHANGED, path, f"Description for enum value '{path}' changed from '{old_value.description or ''}' to '{new_value.description or ''}'"))
            old_reason, new_reason = old_value.deprecation_reason, new_value.deprecation_reason
            if old_reason is None and new_reason is not None:
                changes.append(ChangeRecord(ChangeType.ENUM_VALUE_DEPRECATION_REASON_ADDED, path, f"Enum value '{path}' was deprecated with reason '{new_reason}'"))
            elif old_reason is not None and new_reason is None:
                changes.append(ChangeRecord(ChangeType.ENUM_VALUE_DEPRECATION_REASON_REMOVED, path, f"Deprecation reason was removed from enum value '{path}'"))
            elif old_reason != new_reason:
                changes.append(ChangeRecord(ChangeType.ENUM_VALUE_DEPRECATION_REASON_CHANGED, path, f"Enum value '{path}' deprecation reason changed from '{old_reason}' to '{new_reason}'"))

    # Input objects

    def _compare_input_fields(self, old_t: GraphQLInputObjectType, new_t: GraphQLInputObjectType, changes: list[ChangeRecord]):
        old_f, new_f = old_t.fields, new_t.fields
        for n in new_f:
            if n not in old_f:
                changes.append(ChangeRecord(ChangeType.INPUT_FIELD_ADDED, f"{old_t.name}.{n}", f"Input field '{n}' was added to input object type '{old_t.name}'"))
        for n in old_f:
            if n not in new_f:
                changes.append(ChangeRecord(ChangeType.INPUT_FIELD_REMOVED, f"{old_t.name}.{n}", f"Input field '{n}' was removed from input object type '{old_t.name}'"))
        for n in old_f:
            if n not in new_f:
                continue
            path = f"{old_t.name}.{n}"
            old_field, new_field = old_f[n], new_f[n]
            if str(old_field.type) != str(new_field.type):
                changes.append(ChangeRecord(ChangeType.INPUT_FIELD_TYPE_CHANGED, path, f"Input field '{path}' changed type from '{old_field.type}' to '{new_field.type}'"))
            old_default, new_default = _print_default(old_field), _print_default(new_field)
            if old_default != new_default:
                changes.append(ChangeRecord(ChangeType.INPUT_FIELD_DEFAULT_VALUE_CHANGED, path, _default_message(f"input field '{path}'", old_default, new_default)))
            self._compare_descriptions(
                path, old_field.description, new_field.description, changes,
                added=ChangeType.INPUT_FIELD_DESCRIPTION_ADDED, removed=ChangeType.INPUT_FIELD_DESCRIPTION_REMOVED,
                changed=ChangeType.INPUT_FIELD_DESCRIPTION_CHANGED, subject=f"input field '{path}'",
            )

    # Unions and interfaces

    def _compare_union_members(self, old_t: GraphQLUnionType, new_t: GraphQLUnionType, changes: list[ChangeRecord]):
        old_m = [t.name for t in old_t.types]
        new_m = [t.name for t in new_t.types]
        for n in old_m:
            if n not in new_m:
                changes.append(ChangeRecord(ChangeType.UNION_MEMBER_REMOVED, old_t.name, f"Member '{n}' was removed from Union type '{old_t.name}'"))
        for n in new_m:
            if n not in old_m:
                changes.append(ChangeRecord(ChangeType.UNION_MEMBER_ADDED, old_t.name, f"Member '{n}' was added to Union type '{old_t.name}'"))

    def _compare_interfaces(self, old_t: GraphQLObjectType, new_t: GraphQLObjectType, changes: list[ChangeRecord]):
        old_i = [i.name for i in old_t.interfaces]
        new_i = [i.name for i in new_t.interfaces]
        for n in old_i:
            if n not in new_i:
                changes.append(ChangeRecord(ChangeType.OBJECT_TYPE_INTERFACE_REMOVED, old_t.name, f"'{old_t.name}' object type no longer implements '{n}' interface"))
        for n in new_i:
            if n not in old_i:
                changes.append(ChangeRecord(ChangeType.OBJECT_TYPE_INTERFACE_ADDED, old_t.name, f"'{old_t.name}' object implements '{n}' interface"))

    # Directives

    def _compare_directives(self, old_s: GraphQLSchema, new_s: GraphQLSchema, changes: list[ChangeRecord]):
        old_d = {d.name: d for d in old_s.directives if not is_specified_directive(d)}
        new_d = {d.name: d for d in new_s.directives if not is_specified_directive(d)}
        for n in new_d:
            if n not in old_d:
                changes.append(ChangeRecord(ChangeType.DIRECTIVE_ADDED, f"@{n}", f"Directive '{n}' was added"))
        for n in old_d:
            if n not in new_d:
                changes.append(ChangeRecord(ChangeType.DIRECTIVE_REMOVED, f"@{n}", f"Directive '{n}' was removed"))
        for n in old_d:
            if n in new_d:
                self._compare_directive_details(old_d[n], new_d[n], changes)

    def _compare_directive_details(self, old_d: GraphQLDirective, new_d: GraphQLDirective, changes: list[ChangeRecord]):
        path = f"@{old_d.name}"
        if (old_d.description or "") != (new_d.description or ""):
            changes.append(ChangeRecord(ChangeType.DIRECTIVE_DESCRIPTION_CHANGED, path, f"Directive '{old_d.name}' description changed from '{old_d.description or ''}' to '{new_d.description or ''}'"))
        old_l = [loc.name for loc in old_d.locations]
        new_l = [loc.name for loc in new_d.locations]
        for loc in new_l:
            if loc not in old_l:
                changes.append(ChangeRecord(ChangeType.DIRECTIVE_LOCATION_ADDED, path, f"Location '{loc}' was added to directive '{old_d.name}'"))
        for loc in old_l:
            if loc not in new_l:
                changes.append(ChangeRecord(ChangeType.DIRECTIVE_LOCATION_REMOVED, path, f"Location '{loc}' was removed from directive '{old_d.name}'"))
        old_args, new_args = old_d.args, new_d.args
        for n in new_args:
            if n not in old_args:
                changes.append(ChangeRecord(ChangeType.DIRECTIVE_ARGUMENT_ADDED, f"{path}.{n}", f"Argument '{n}' was added to directive '{old_d.name}'"))
        for n in old_args:
            if n not in new_args:
                changes.append(ChangeRecord(ChangeType.DIRECTIVE_ARGUMENT_REMOVED, f"{path}.{n}", f"Argument '{n}' was removed from directive '{old_d.name}'"))
        for n in old_args:
            if n not in new_args:
                continue
            old_a, new_a, arg_path = old_args[n], new_args[n], f"{path}.{n}"
            if str(old_a.type) != str(new_a.type):
                changes.append(ChangeRecord(ChangeType.DIRECTIVE_ARGUMENT_TYPE_CHANGED, arg_path, f"Type for argument '{n}' on directive '{old_d.name}' changed from '{old_a.type}' to '{new_a.type}'"))
            old_default, new_default = _print_default(old_a), _print_default(new_a)
            if old_default != new_default:
                changes.append(ChangeRecord(ChangeType.DIRECTIVE_ARGUMENT_DEFAULT_VALUE_CHANGED, arg_path, _default_message(f"argument '{n}' on directive '{old_d.name}'", old_default, new_default)))
            if (old_a.description or "") != (new_a.description or ""):
                changes.append(ChangeRecord(ChangeType.DIRECTIVE_ARGUMENT_DESCRIPTION_CHANGED, arg_path, f"Description for argument '{n}' on directive '{old_d.name}' changed from '{old_a.description or ''}' to '{new_a.description or ''}'"))

    # Shared

    def _compare_descriptions(self, path: str, old: Optional[str], new: Optional[str], changes: list[ChangeRecord], *,
                              added: ChangeType, removed: ChangeType, changed: ChangeType, subject: str):
        old, new = old or None, new or None
        if old == new:
            return
        if not old:
            changes.append(ChangeRecord(added, path, f"Description '{new}' was added to {subject}"))
        elif not new:
            changes.append(ChangeRecord(removed, path, f"Description '{old}' was removed from {subject}"))
        else:
            changes.append(ChangeRecord(changed, path, f"Description for {subject} changed from '{old}' to '{new}'"))


def _is_comparable_type(type_: GraphQLNamedType) -> bool:
    return not is_introspection_type(type_) and not is_specified_scalar_type(type_)


def _kind_of(type_: GraphQLNamedType) -> str:
    if is_object_type(type_): return 'OBJECT'
    if is_interface_type(type_): return 'INTERFACE'
    if is_union_type(type_): return 'UNION'
    if is_enum_type(type_): return 'ENUM'
    if is_input_object_type(type_): return 'INPUT_OBJECT'
    if is_scalar_type(type_): return 'SCALAR'
    return type(type_).__name__


def _kind_label(type_: GraphQLNamedType) -> str:
    return 'interface type' if is_interface_type(type_) else 'object type'


def _print_default(value_holder: Any) -> Optional[str]:
    """Render the default of an argument or input field as SDL, or None when unset."""
    ast_node = getattr(value_holder, 'ast_node', None)
    default_node = getattr(ast_node, 'default_value', None) if ast_node else None
    if default_node is not None:
        return print_ast(default_node)
    if value_holder.default_value is Undefined:
        return None
    value_ast = ast_from_value(value_holder.default_value, value_holder.type)
    return print_ast(value_ast) if value_ast else None


def _default_message(subject: str, old: Optional[str], new: Optional[str]) -> str:
    if old is None:
        return f"Default value '{new}' was added to {subject}"
    if new is None:
        return f"Default value '{old}' was removed from {subject}"
    return f"Default value for {subject} changed from '{old}' to '{new}'"
