# metamesh/gpu.py
from typing import Dict

import moderngl

from metamesh.assets.types import MeshData


class GPUMesh:
    """
    Holds the GPU resources for a generated mesh: VBO, IBO and VAOs.
    """

    def __init__(self, ctx: moderngl.Context, data: MeshData) -> None:
        self._ctx = ctx
        self.layout = data.vertex_layout
        self.vertex_count = data.vertex_count
        self.index_count = data.index_count
        self.index_element_size = data.index_element_size
        self.aabb = data.aabb

        self.vbo = ctx.buffer(data.vertices)
        self.ibo = ctx.buffer(data.indices) if data.indices else None

        self._vaos: Dict[int, moderngl.VertexArray] = {}

    def get_default_vao(
        self, program: moderngl.Program
    ) -> moderngl.VertexArray:
        """Retrieves or creates a VAO binding this mesh's layout to a program."""
        key = program.glo

        if key in self._vaos:
            return self._vaos[key]

        content = [(self.vbo, self.layout.format, *self.layout.attributes)]
        vao = self._ctx.vertex_array(
            program,
            content,
            index_buffer=self.ibo,
            index_element_size=self.index_element_size,
        )

        self._vaos[key] = vao
        return vao

    def release(self) -> None:
        for vao in self._vaos.values():
            vao.release()
        self._vaos.clear()
        self.vbo.release()
        if self.ibo is not None:
            self.ibo.release()
