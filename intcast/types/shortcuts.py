from intcast.types.primitives import SINT, UINT

# shortcut type names
I8_T = SINT(8)
I16_T = SINT(16)
I32_T = SINT(32)
I64_T = SINT(64)

U8_T = UINT(8)
U16_T = UINT(16)
U32_T = UINT(32)
U64_T = UINT(64)
