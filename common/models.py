from django.db import models
from django.utils.translation import gettext_lazy as _

from model_utils.fields import AutoCreatedField, AutoLastModifiedField

from common.utils.model_utils import generate_unique_id


class IndexedTimeStampedModel(models.Model):
    created = AutoCreatedField(_("created"), db_index=True)
    modified = AutoLastModifiedField(_("modified"), db_index=True)

    class Meta:
        abstract = True


class MetaJsonFieldModel(models.Model):
    meta = models.JSONField(_("meta"), default=dict, blank=True)

    class Meta:
        abstract = True


class BaseModel(IndexedTimeStampedModel, MetaJsonFieldModel):
    class Meta(IndexedTimeStampedModel.Meta, MetaJsonFieldModel.Meta):
        abstract = True


class PublicUidModel(BaseModel):
    """
    A model exposed to anonymous visitors through an opaque token instead of its primary key.
    """

    uid = models.CharField(
        _("uid"), max_length=64, unique=True, default=generate_unique_id, editable=False
    )

    class Meta(BaseModel.Meta):
        abstract = True
