from sitecms.extensions import db
from sitecms.domain.slides import (
    REFERENCE_COLUMNS,
    SCOPE_COLUMNS,
    SlideScope,
    SlideTarget,
    scope_from_columns,
    target_from_columns,
)
from .base import BaseModel


def _one_parent_check():
    terms = " + ".join(
        f"(CASE WHEN {column} IS NOT NULL THEN 1 ELSE 0 END)"
        for column in SCOPE_COLUMNS.values()
    )
    return db.CheckConstraint(f"{terms} = 1", name="ck_hero_slide_one_parent")


class HeroSlide(BaseModel):
    __tablename__ = "hero_slides"

    # Parent scope: exactly one is set (see `scope`)
    hero_section_id = db.Column(
        db.String(36), db.ForeignKey("hero_sections.id", ondelete="CASCADE"), nullable=True, index=True
    )
    parent_import_service_id = db.Column(
        db.String(36), db.ForeignKey("import_services.id", ondelete="CASCADE"), nullable=True, index=True
    )
    parent_contracting_service_id = db.Column(
        db.String(36), db.ForeignKey("contracting_services.id", ondelete="CASCADE"), nullable=True, index=True
    )

    title_en = db.Column(db.String(255), nullable=False)
    title_ar = db.Column(db.String(255), nullable=False)
    subtitle_en = db.Column(db.Text, nullable=True)
    subtitle_ar = db.Column(db.Text, nullable=True)

    # Discriminant for the reference columns below (see `target`)
    slide_type = db.Column(db.String(32), nullable=False, default="custom")

    article_id = db.Column(db.String(36), db.ForeignKey("articles.id", ondelete="SET NULL"), nullable=True)
    product_id = db.Column(db.String(36), db.ForeignKey("products.id", ondelete="SET NULL"), nullable=True)
    main_service_id = db.Column(db.String(36), db.ForeignKey("main_services.id", ondelete="SET NULL"), nullable=True)
    import_service_id = db.Column(db.String(36), db.ForeignKey("import_services.id", ondelete="SET NULL"), nullable=True)
    contracting_service_id = db.Column(
        db.String(36), db.ForeignKey("contracting_services.id", ondelete="SET NULL"), nullable=True
    )
    project_id = db.Column(db.String(36), db.ForeignKey("projects.id", ondelete="SET NULL"), nullable=True)

    cta_enabled = db.Column(db.Boolean, default=False, nullable=False)
    cta_text_en = db.Column(db.String(255), nullable=True)
    cta_text_ar = db.Column(db.String(255), nullable=True)
    cta_href = db.Column(db.String(1024), nullable=True)

    background_image_id = db.Column(db.String(36), db.ForeignKey("images.id", ondelete="SET NULL"), nullable=True)
    background_color = db.Column(db.String(7), nullable=True)  # "#1a1a2e"
    overlay_opacity = db.Column(db.Integer, default=0)  # 0-100

    is_active = db.Column(db.Boolean, default=True, nullable=False, index=True)
    sort_order = db.Column(db.Integer, default=0, nullable=False)

    hero_section = db.relationship("HeroSection", foreign_keys=[hero_section_id], back_populates="slides")
    parent_import_service = db.relationship(
        "ImportService", foreign_keys=[parent_import_service_id], back_populates="slides"
    )
    parent_contracting_service = db.relationship(
        "ContractingService", foreign_keys=[parent_contracting_service_id], back_populates="slides"
    )
    background_image = db.relationship("Image", foreign_keys=[background_image_id])

    __table_args__ = (
        _one_parent_check(),
        db.CheckConstraint(
            "overlay_opacity IS NULL OR (overlay_opacity >= 0 AND overlay_opacity <= 100)",
            name="ck_hero_slide_overlay_range",
        ),
        db.Index("idx_hero_slide_section_order", "hero_section_id", "sort_order"),
    )

    @property
    def target(self) -> SlideTarget:
        return target_from_columns(
            self.slide_type,
            {column: getattr(self, column) for column in REFERENCE_COLUMNS.values()},
        )

    @target.setter
    def target(self, target: SlideTarget):
        self.slide_type = target.kind.value
        for column in REFERENCE_COLUMNS.values():
            setattr(self, column, target.ref_id if column == target.column else None)

    @property
    def scope(self) -> SlideScope:
        return scope_from_columns(
            {column: getattr(self, column) for column in SCOPE_COLUMNS.values()}
        )

    @scope.setter
    def scope(self, scope: SlideScope):
        for column in SCOPE_COLUMNS.values():
            setattr(self, column, scope.parent_id if column == scope.column else None)

    @property
    def background_image_url(self):
        return self.background_image.url if self.background_image else None
