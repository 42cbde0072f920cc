"""Shader sources for the object pass and the HUD overlay pass."""


def get_object_shaders():
    """Return the GLSL 330 vertex and fragment shaders for the mesh.

    The object offset is added after the model transform so that it
    translates in world units independent of rotation and scale. Shading
    mixes a dark and a bright red by the angle to ``u_light``.

    Returns
    -------
    vertex_shader, fragment_shader : tuple[str, str]
    """
    vertex_shader = """
        #version 330

        layout (location = 0) in vec3 position;
        layout (location = 1) in vec3 normal;

        out vec3 v_normal;

        uniform mat4 model;
        uniform vec3 offset;
        uniform mat4 view;
        uniform mat4 perspective;

        void main()
        {
          v_normal = transpose(inverse(mat3(model))) * normal;
          vec4 world = model * vec4(position, 1.0) + vec4(offset, 0.0);
          gl_Position = perspective * view * world;
        }
    """

    fragment_shader = """
        #version 330

        in vec3 v_normal;
        out vec4 color;

        uniform vec3 u_light;

        void main()
        {
          float brightness = dot(normalize(v_normal), normalize(u_light));
          vec3 dark_color = vec3(0.6, 0.0, 0.0);
          vec3 regular_color = vec3(1.0, 0.0, 0.0);
          color = vec4(mix(dark_color, regular_color, brightness), 1.0);
        }
    """

    return vertex_shader, fragment_shader


def get_overlay_shaders():
    """Return the shaders that blit the HUD texture over the whole viewport.

    Returns
    -------
    vertex_shader, fragment_shader : tuple[str, str]
    """
    vertex_shader = """
        #version 330

        layout (location = 0) in vec2 corner;
        out vec2 uv;

        void main()
        {
          // Pillow images start at the top row, GL textures at the bottom.
          uv = vec2((corner.x + 1.0) * 0.5, (1.0 - corner.y) * 0.5);
          gl_Position = vec4(corner, 0.0, 1.0);
        }
    """

    fragment_shader = """
        #version 330

        in vec2 uv;
        out vec4 color;

        uniform sampler2D hud;

        void main()
        {
          color = texture(hud, uv);
        }
    """

    return vertex_shader, fragment_shader
