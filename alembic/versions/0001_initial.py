"""initial schema"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _estado(*values: str, name: str, length: int = 10) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True, length=length)


def upgrade() -> None:
    op.create_table(
        "usuarios",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("nombre", sa.String(length=50), nullable=False),
        sa.Column("apellidos", sa.String(length=100), nullable=False),
        sa.Column("cedula", sa.String(length=20), nullable=False),
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column("telefono", sa.String(length=15), nullable=True),
        sa.Column("direccion", sa.String(length=200), nullable=True),
        sa.Column("tipo_usuario", _estado("cliente", "tecnico", name="ck_usuario_tipo"), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("estado", _estado("activo", "inactivo", name="ck_usuario_estado"), nullable=False),
        sa.Column("fecha_registro", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("cedula"),
    )
    op.create_index(op.f("ix_usuarios_id"), "usuarios", ["id"], unique=False)
    op.create_index(op.f("ix_usuarios_email"), "usuarios", ["email"], unique=True)

    op.create_table(
        "estaciones",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("nombre", sa.String(length=100), nullable=False),
        sa.Column("direccion", sa.String(length=200), nullable=False),
        sa.Column("telefono", sa.String(length=15), nullable=True),
        sa.Column("email", sa.String(length=100), nullable=True),
        sa.Column("provincia", sa.String(length=50), nullable=False),
        sa.Column("canton", sa.String(length=50), nullable=False),
        sa.Column("distrito", sa.String(length=50), nullable=False),
        sa.Column("horario_atencion", sa.String(length=100), nullable=True),
        sa.Column("estado", _estado("activa", "inactiva", name="ck_estacion_estado"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_estaciones_id"), "estaciones", ["id"], unique=False)

    op.create_table(
        "vehiculos",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("placa", sa.String(length=10), nullable=False),
        sa.Column("propietario_id", sa.Integer(), nullable=False),
        sa.Column("marca", sa.String(length=50), nullable=False),
        sa.Column("modelo", sa.String(length=50), nullable=False),
        sa.Column("anio", sa.Integer(), nullable=False),
        sa.Column("numero_chasis", sa.String(length=50), nullable=True),
        sa.Column("color", sa.String(length=30), nullable=True),
        sa.Column("tipo_combustible", sa.String(length=20), nullable=True),
        sa.Column("cilindrada", sa.String(length=10), nullable=True),
        sa.Column("fecha_registro", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["propietario_id"], ["usuarios.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("placa"),
    )
    op.create_index(op.f("ix_vehiculos_id"), "vehiculos", ["id"], unique=False)
    op.create_index(op.f("ix_vehiculos_propietario_id"), "vehiculos", ["propietario_id"], unique=False)

    op.create_table(
        "citas",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("vehiculo_id", sa.Integer(), nullable=False),
        sa.Column("estacion_id", sa.Integer(), nullable=False),
        sa.Column("fecha_cita", sa.Date(), nullable=False),
        sa.Column("hora_cita", sa.Time(), nullable=False),
        sa.Column(
            "estado",
            _estado("programada", "completada", "cancelada", name="ck_cita_estado", length=15),
            nullable=False,
        ),
        sa.Column("observaciones", sa.String(length=500), nullable=True),
        sa.Column("fecha_creacion", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["vehiculo_id"], ["vehiculos.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["estacion_id"], ["estaciones.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_citas_id"), "citas", ["id"], unique=False)
    op.create_index(op.f("ix_citas_vehiculo_id"), "citas", ["vehiculo_id"], unique=False)
    op.create_index(op.f("ix_citas_estacion_id"), "citas", ["estacion_id"], unique=False)
    op.create_index("ix_citas_fecha_hora", "citas", ["fecha_cita", "hora_cita"], unique=False)
    op.create_index(
        "ux_citas_horario_programado",
        "citas",
        ["estacion_id", "fecha_cita", "hora_cita"],
        unique=True,
        sqlite_where=sa.text("estado = 'programada'"),
        postgresql_where=sa.text("estado = 'programada'"),
    )

    op.create_table(
        "inspecciones",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("cita_id", sa.Integer(), nullable=False),
        sa.Column("tecnico_id", sa.Integer(), nullable=False),
        sa.Column("fecha_inspeccion", sa.DateTime(), nullable=False),
        sa.Column("resultado", _estado("aprobado", "rechazado", name="ck_inspeccion_resultado"), nullable=False),
        sa.Column("observaciones_tecnicas", sa.String(length=1000), nullable=True),
        sa.Column("fecha_vencimiento", sa.DateTime(), nullable=True),
        sa.Column("numero_certificado", sa.String(length=50), nullable=True),
        sa.ForeignKeyConstraint(["cita_id"], ["citas.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["tecnico_id"], ["usuarios.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_inspecciones_id"), "inspecciones", ["id"], unique=False)
    op.create_index(op.f("ix_inspecciones_cita_id"), "inspecciones", ["cita_id"], unique=False)
    op.create_index(op.f("ix_inspecciones_tecnico_id"), "inspecciones", ["tecnico_id"], unique=False)
    op.create_index(op.f("ix_inspecciones_fecha_inspeccion"), "inspecciones", ["fecha_inspeccion"], unique=False)

    op.create_table(
        "detalles_inspeccion",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("inspeccion_id", sa.Integer(), nullable=False),
        sa.Column("categoria_revision", sa.String(length=50), nullable=False),
        sa.Column("resultado_item", _estado("OK", "FALLO", name="ck_detalle_resultado"), nullable=False),
        sa.Column("observaciones_item", sa.String(length=500), nullable=True),
        sa.ForeignKeyConstraint(["inspeccion_id"], ["inspecciones.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_detalles_inspeccion_id"), "detalles_inspeccion", ["id"], unique=False)
    op.create_index(
        op.f("ix_detalles_inspeccion_inspeccion_id"), "detalles_inspeccion", ["inspeccion_id"], unique=False
    )

    op.create_table(
        "certificados",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("inspeccion_id", sa.Integer(), nullable=False),
        sa.Column("numero_certificado", sa.String(length=50), nullable=False),
        sa.Column("fecha_emision", sa.DateTime(), nullable=False),
        sa.Column("fecha_vencimiento", sa.DateTime(), nullable=False),
        sa.Column("ruta_archivo_digital", sa.String(length=500), nullable=True),
        sa.Column("estado", _estado("valido", "vencido", "anulado", name="ck_certificado_estado"), nullable=False),
        sa.ForeignKeyConstraint(["inspeccion_id"], ["inspecciones.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("numero_certificado"),
    )
    op.create_index(op.f("ix_certificados_id"), "certificados", ["id"], unique=False)
    op.create_index(op.f("ix_certificados_inspeccion_id"), "certificados", ["inspeccion_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_certificados_inspeccion_id"), table_name="certificados")
    op.drop_index(op.f("ix_certificados_id"), table_name="certificados")
    op.drop_table("certificados")
    op.drop_index(op.f("ix_detalles_inspeccion_inspeccion_id"), table_name="detalles_inspeccion")
    op.drop_index(op.f("ix_detalles_inspeccion_id"), table_name="detalles_inspeccion")
    op.drop_table("detalles_inspeccion")
    op.drop_index(op.f("ix_inspecciones_fecha_inspeccion"), table_name="inspecciones")
    op.drop_index(op.f("ix_inspecciones_tecnico_id"), table_name="inspecciones")
    op.drop_index(op.f("ix_inspecciones_cita_id"), table_name="inspecciones")
    op.drop_index(op.f("ix_inspecciones_id"), table_name="inspecciones")
    op.drop_table("inspecciones")
    op.drop_index("ux_citas_horario_programado", table_name="citas")
    op.drop_index("ix_citas_fecha_hora", table_name="citas")
    op.drop_index(op.f("ix_citas_estacion_id"), table_name="citas")
    op.drop_index(op.f("ix_citas_vehiculo_id"), table_name="citas")
    op.drop_index(op.f("ix_citas_id"), table_name="citas")
    op.drop_table("citas")
    op.drop_index(op.f("ix_vehiculos_propietario_id"), table_name="vehiculos")
    op.drop_index(op.f("ix_vehiculos_id"), table_name="vehiculos")
    op.drop_table("vehiculos")
    op.drop_index(op.f("ix_estaciones_id"), table_name="estaciones")
    op.drop_table("estaciones")
    op.drop_index(op.f("ix_usuarios_email"), table_name="usuarios")
    op.drop_index(op.f("ix_usuarios_id"), table_name="usuarios")
    op.drop_table("usuarios")
