import django_virtual_models as v
from rest_framework import generics, mixins, status
from rest_framework.response import Response
from rest_framework.viewsets import ViewSetMixin


class RefetchReturnInstanceAfterWriteMixin:
    def get_serializer_class(self):
        """
        Return the class to use for the serializer.
        Read actions use `read_serializer_class` when it is set, write actions fall back to
        `write_serializer_class`, and both default to `serializer_class`.
        """
        assert (  # noqa: S101
            self.serializer_class is not None
            or getattr(self, "read_serializer_class", None) is not None
        ), (
            f"'{self.__class__.__name__}' should either include one of `serializer_class` and "
            f"`read_serializer_class` attribute, or override `get_serializer_class()`."
        )

        if self.action in ("list", "retrieve"):
            return getattr(self, "read_serializer_class", None) or self.serializer_class

        return getattr(self, "write_serializer_class", None) or self.serializer_class

    def get_read_serializer(self, *args, **kwargs):
        """
        Return the serializer instance that should be used for serializing output.
        """
        serializer_class = getattr(self, "read_serializer_class", None) or self.serializer_class
        kwargs["context"] = self.get_serializer_context()
        return serializer_class(*args, **kwargs)


class CreateModelMixin(RefetchReturnInstanceAfterWriteMixin, mixins.CreateModelMixin):
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        instance = serializer.instance

        # re-fetches the instance so we get annotations, prefetches, and selects
        annotated_instance = self.get_queryset().get(pk=instance.pk)
        return_serializer = self.get_read_serializer(annotated_instance)
        headers = self.get_success_headers(return_serializer.data)
        return Response(return_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class FilterOnlyOnListMixin:
    def filter_queryset(self, queryset):
        if self.action != "list":
            return queryset
        return super().filter_queryset(queryset)


class CreateAndReadScheduleWebModelViewSet(
    ViewSetMixin,
    FilterOnlyOnListMixin,
    v.GenericVirtualModelViewMixin,
    mixins.RetrieveModelMixin,
    CreateModelMixin,
    mixins.ListModelMixin,
    generics.GenericAPIView,
):
    """
    A viewset that does not allow update of instances.
    It only allows read and create operations.
    """

    pass
