from rest_framework import serializers

from .models import MawbInfo


class MawbInfoSerializer(serializers.ModelSerializer):
    class Meta:
        model = MawbInfo
        fields = "__all__"
        read_only_fields = ("uuid", "created_at", "updated_at")

    def validate_mawb(self, value):
        dup = MawbInfo.objects.filter(mawb=value)
        if self.instance is not None:
            dup = dup.exclude(pk=self.instance.pk)
        if dup.exists():
            raise serializers.ValidationError("mawb already exists")
        return value

    def validate_chargeable_weight(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("must not be negative")
        return value
