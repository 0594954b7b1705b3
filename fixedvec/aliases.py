import numpy as np

from .dimensions import Vec2, Vec3, Vec4, Vec5, Vec6

# Naming follows C: s short, i int, l long, ll long long, f float, d double,
# c char, uc/ui/ul/ull the unsigned variants.

vec2s = Vec2[np.int16]
vec2i = Vec2[np.int32]
vec2l = Vec2[np.int64]
vec2ll = Vec2[np.int64]
vec2f = Vec2[np.float32]
vec2d = Vec2[np.float64]
vec2c = Vec2[np.int8]
vec2uc = Vec2[np.uint8]
vec2ui = Vec2[np.uint32]
vec2ul = Vec2[np.uint64]
vec2ull = Vec2[np.uint64]

vector2s = Vec2[np.int16]
vector2i = Vec2[np.int32]
vector2l = Vec2[np.int64]
vector2ll = Vec2[np.int64]
vector2f = Vec2[np.float32]
vector2d = Vec2[np.float64]
vector2c = Vec2[np.int8]
vector2uc = Vec2[np.uint8]
vector2ui = Vec2[np.uint32]
vector2ul = Vec2[np.uint64]
vector2ull = Vec2[np.uint64]

vec3s = Vec3[np.int16]
vec3i = Vec3[np.int32]
vec3l = Vec3[np.int64]
vec3ll = Vec3[np.int64]
vec3f = Vec3[np.float32]
vec3d = Vec3[np.float64]
vec3c = Vec3[np.int8]
vec3uc = Vec3[np.uint8]
vec3ui = Vec3[np.uint32]
vec3ul = Vec3[np.uint64]
vec3ull = Vec3[np.uint64]

vector3s = Vec3[np.int16]
vector3i = Vec3[np.int32]
vector3l = Vec3[np.int64]
vector3ll = Vec3[np.int64]
vector3f = Vec3[np.float32]
vector3d = Vec3[np.float64]
vector3c = Vec3[np.int8]
vector3uc = Vec3[np.uint8]
vector3ui = Vec3[np.uint32]
vector3ul = Vec3[np.uint64]
vector3ull = Vec3[np.uint64]

vec4s = Vec4[np.int16]
vec4i = Vec4[np.int32]
vec4l = Vec4[np.int64]
vec4ll = Vec4[np.int64]
vec4f = Vec4[np.float32]
vec4d = Vec4[np.float64]
vec4c = Vec4[np.int8]
vec4uc = Vec4[np.uint8]
vec4ui = Vec4[np.uint32]
vec4ul = Vec4[np.uint64]
vec4ull = Vec4[np.uint64]

vector4s = Vec4[np.int16]
vector4i = Vec4[np.int32]
vector4l = Vec4[np.int64]
vector4ll = Vec4[np.int64]
vector4f = Vec4[np.float32]
vector4d = Vec4[np.float64]
vector4c = Vec4[np.int8]
vector4uc = Vec4[np.uint8]
vector4ui = Vec4[np.uint32]
vector4ul = Vec4[np.uint64]
vector4ull = Vec4[np.uint64]

vec5s = Vec5[np.int16]
vec5i = Vec5[np.int32]
vec5l = Vec5[np.int64]
vec5ll = Vec5[np.int64]
vec5f = Vec5[np.float32]
vec5d = Vec5[np.float64]
vec5c = Vec5[np.int8]
vec5uc = Vec5[np.uint8]
vec5ui = Vec5[np.uint32]
vec5ul = Vec5[np.uint64]
vec5ull = Vec5[np.uint64]

vector5s = Vec5[np.int16]
vector5i = Vec5[np.int32]
vector5l = Vec5[np.int64]
vector5ll = Vec5[np.int64]
vector5f = Vec5[np.float32]
vector5d = Vec5[np.float64]
vector5c = Vec5[np.int8]
vector5uc = Vec5[np.uint8]
vector5ui = Vec5[np.uint32]
vector5ul = Vec5[np.uint64]
vector5ull = Vec5[np.uint64]

vec6s = Vec6[np.int16]
vec6i = Vec6[np.int32]
vec6l = Vec6[np.int64]
vec6ll = Vec6[np.int64]
vec6f = Vec6[np.float32]
vec6d = Vec6[np.float64]
vec6c = Vec6[np.int8]
vec6uc = Vec6[np.uint8]
vec6ui = Vec6[np.uint32]
vec6ul = Vec6[np.uint64]
vec6ull = Vec6[np.uint64]

vector6s = Vec6[np.int16]
vector6i = Vec6[np.int32]
vector6l = Vec6[np.int64]
vector6ll = Vec6[np.int64]
vector6f = Vec6[np.float32]
vector6d = Vec6[np.float64]
vector6c = Vec6[np.int8]
vector6uc = Vec6[np.uint8]
vector6ui = Vec6[np.uint32]
vector6ul = Vec6[np.uint64]
vector6ull = Vec6[np.uint64]


int2 = Vec2[np.int32]
long2 = Vec2[np.int64]
float2 = Vec2[np.float32]
double2 = Vec2[np.float64]

int3 = Vec3[np.int32]
long3 = Vec3[np.int64]
float3 = Vec3[np.float32]
double3 = Vec3[np.float64]

int4 = Vec4[np.int32]
long4 = Vec4[np.int64]
float4 = Vec4[np.float32]
double4 = Vec4[np.float64]

int5 = Vec5[np.int32]
long5 = Vec5[np.int64]
float5 = Vec5[np.float32]
double5 = Vec5[np.float64]

int6 = Vec6[np.int32]
long6 = Vec6[np.int64]
float6 = Vec6[np.float32]
double6 = Vec6[np.float64]

__all__ = [
    "vec2s",
    "vec2i",
    "vec2l",
    "vec2ll",
    "vec2f",
    "vec2d",
    "vec2c",
    "vec2uc",
    "vec2ui",
    "vec2ul",
    "vec2ull",
    "vector2s",
    "vector2i",
    "vector2l",
    "vector2ll",
    "vector2f",
    "vector2d",
    "vector2c",
    "vector2uc",
    "vector2ui",
    "vector2ul",
    "vector2ull",
    "vec3s",
    "vec3i",
    "vec3l",
    "vec3ll",
    "vec3f",
    "vec3d",
    "vec3c",
    "vec3uc",
    "vec3ui",
    "vec3ul",
    "vec3ull",
    "vector3s",
    "vector3i",
    "vector3l",
    "vector3ll",
    "vector3f",
    "vector3d",
    "vector3c",
    "vector3uc",
    "vector3ui",
    "vector3ul",
    "vector3ull",
    "vec4s",
    "vec4i",
    "vec4l",
    "vec4ll",
    "vec4f",
    "vec4d",
    "vec4c",
    "vec4uc",
    "vec4ui",
    "vec4ul",
    "vec4ull",
    "vector4s",
    "vector4i",
    "vector4l",
    "vector4ll",
    "vector4f",
    "vector4d",
    "vector4c",
    "vector4uc",
    "vector4ui",
    "vector4ul",
    "vector4ull",
    "vec5s",
    "vec5i",
    "vec5l",
    "vec5ll",
    "vec5f",
    "vec5d",
    "vec5c",
    "vec5uc",
    "vec5ui",
    "vec5ul",
    "vec5ull",
    "vector5s",
    "vector5i",
    "vector5l",
    "vector5ll",
    "vector5f",
    "vector5d",
    "vector5c",
    "vector5uc",
    "vector5ui",
    "vector5ul",
    "vector5ull",
    "vec6s",
    "vec6i",
    "vec6l",
    "vec6ll",
    "vec6f",
    "vec6d",
    "vec6c",
    "vec6uc",
    "vec6ui",
    "vec6ul",
    "vec6ull",
    "vector6s",
    "vector6i",
    "vector6l",
    "vector6ll",
    "vector6f",
    "vector6d",
    "vector6c",
    "vector6uc",
    "vector6ui",
    "vector6ul",
    "vector6ull",
    "int2",
    "long2",
    "float2",
    "double2",
    "int3",
    "long3",
    "float3",
    "double3",
    "int4",
    "long4",
    "float4",
    "double4",
    "int5",
    "long5",
    "float5",
    "double5",
    "int6",
    "long6",
    "float6",
    "double6",
]
